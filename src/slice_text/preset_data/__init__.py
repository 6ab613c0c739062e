"""Default preset files shipped with slice-text."""
