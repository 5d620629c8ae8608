# app/app.py
from __future__ import annotations

import json
import tempfile
from typing import Optional, Tuple

import gradio as gr

from permtest.config import DEFAULT_TRIALS_PER_WORKER, DEFAULT_WORKERS, PermutationConfig
from permtest.errors import PermtestError
from permtest.hypothesis import format_report, run_from_files
from permtest.logging_utils import configure_logging


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------
def _file_path(file) -> Optional[str]:
    """gr.File yields either a path string or a tempfile wrapper with .name."""
    if file is None:
        return None
    if isinstance(file, str):
        return file
    return getattr(file, "name", None)


def _optional_int(x) -> Optional[int]:
    if x is None or x == "":
        return None
    return int(x)


# -----------------------------------------------------------------------------
# Analysis
# -----------------------------------------------------------------------------
def analyze(
    control_file,
    treatment_file,
    workers: float = DEFAULT_WORKERS,
    trials_per_worker: float = DEFAULT_TRIALS_PER_WORKER,
    seed=None,
) -> Tuple[str, Optional[str]]:
    control_path = _file_path(control_file)
    treatment_path = _file_path(treatment_file)
    if not control_path or not treatment_path:
        return "Upload both a control and a treatment file.", None

    try:
        config = PermutationConfig(
            workers=int(workers),
            trials_per_worker=int(trials_per_worker),
            seed=_optional_int(seed),
        )
        report = run_from_files(control_path, treatment_path, config)
    except PermtestError as exc:
        return f"**Error**: {exc}", None

    tmp = tempfile.NamedTemporaryFile(delete=False, suffix=".json")
    tmp.close()
    with open(tmp.name, "w", encoding="utf-8") as f:
        json.dump(report.as_dict(), f, indent=2)

    header = [
        f"**Result**: {report.result}",
        f"**p-value**: {report.p_value:.4f} over {report.trials:,} permutations",
        "```\n" + format_report(report) + "\n```",
    ]
    return "\n\n".join(header), tmp.name


# -----------------------------------------------------------------------------
# UI
# -----------------------------------------------------------------------------
def build_ui() -> gr.Blocks:
    with gr.Blocks(title="Permutation Test") as demo:
        gr.Markdown(
            "# Permutation Test\n"
            "Upload a control and a treatment file (one number per line)."
        )
        with gr.Row():
            control_in = gr.File(label="Control sample", file_types=[".dat", ".txt"])
            treatment_in = gr.File(label="Treatment sample", file_types=[".dat", ".txt"])
        with gr.Row():
            workers = gr.Slider(1, DEFAULT_WORKERS, value=DEFAULT_WORKERS, step=1, label="Workers")
            trials = gr.Slider(100, 5000, value=DEFAULT_TRIALS_PER_WORKER, step=100,
                               label="Permutations per worker")
            seed = gr.Number(value=None, precision=0, label="Seed (blank = random)")

        report_md = gr.Markdown(value="—")
        json_file = gr.File(label="Download JSON report", interactive=False)

        go = gr.Button("Run test", variant="primary")
        go.click(
            analyze,
            inputs=[control_in, treatment_in, workers, trials, seed],
            outputs=[report_md, json_file],
            api_name="analyze",
        )

        gr.Markdown(
            "—\nOne-sided test: the tail follows the sign of mean(treatment) - mean(control).\n"
        )

    return demo


if __name__ == "__main__":
    configure_logging("info")
    demo = build_ui()
    # Bind to 0.0.0.0 to avoid the 'localhost not accessible' error on some proxies.
    demo.launch(server_name="0.0.0.0", server_port=7860, share=False, inbrowser=False)
