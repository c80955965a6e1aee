"""Pure projection, sampling, scale and chart geometry code."""
