"""AquaQual: climate risk chat for South Florida neighborhoods."""
