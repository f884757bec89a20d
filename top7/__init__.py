"""Top-7 song chart contest scoring."""
