"""LiftTrax conjugate wave generator."""
