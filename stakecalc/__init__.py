"""Kelly stake calculator: odds normalisation, Kelly sizing and form helpers."""
