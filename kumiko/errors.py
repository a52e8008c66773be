"""Package exceptions."""

from __future__ import annotations


class KumikoError(Exception):
    pass


class UnknownColorSchemeError(KumikoError, ValueError):
    """Raised for a color scheme name with no entry in the scheme table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f'Unknown color scheme: "{name}"')


class RasterizationError(KumikoError):
    """SVG → PNG conversion failed inside the rendering backend."""
