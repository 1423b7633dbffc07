# helpers/initializers.py
import numpy as np

BIAS_INIT = 0.1


def he_normal(rng, output_size, input_size):
    # He initialization: N(0, 1) * sqrt(2 / fan_in), drawn row-major
    return rng.standard_normal((output_size, input_size)) * np.sqrt(2.0 / input_size)


def constant_bias(size, value=BIAS_INIT):
    # small positive constant so units are not dead at the first activation
    return np.full(size, value, dtype=np.float64)
