from .gradients import (
    polynomial_gradient, constant_gradient, liquid_gradient, gas_gradient, z_factor, validation_gradient
)
