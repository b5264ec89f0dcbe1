"""Single source of truth for the gerlib version string."""

__version__: str = "0.1.0"
