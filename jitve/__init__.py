"""jitve — narzędzie CLI estymatora JITVE."""

__version__ = "0.1.0"
