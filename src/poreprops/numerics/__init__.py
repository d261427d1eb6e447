"""Numerical machinery of poreprops: dense forward-mode automatic differentiation,
floating point precision settings and nonlinear solvers."""
