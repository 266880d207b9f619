"""Step settings, DR subsets and shareable preferences for an FMC cube solver."""

__version__ = "1.4.0"