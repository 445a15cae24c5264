"""In-memory stand-ins for running tflap without a terminal."""
