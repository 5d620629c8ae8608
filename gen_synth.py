import numpy as np

rng = np.random.default_rng(7); N_CONTROL = 200; N_TREATMENT = 180; SHIFT = 0.8
control = rng.normal(10.0, 4.0, N_CONTROL)
treatment = rng.normal(10.0 + SHIFT, 4.0, N_TREATMENT)
np.savetxt("control.dat", np.round(control, 3), fmt="%.3f")
np.savetxt("treatment.dat", np.round(treatment, 3), fmt="%.3f")
print("Wrote control.dat", len(control), "and treatment.dat", len(treatment))
