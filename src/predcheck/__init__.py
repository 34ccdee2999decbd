"""PredCheck - validation of untrusted prediction-market API payloads and parameters."""

__version__ = "0.1.0"
