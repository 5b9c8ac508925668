"""Packaged resources for jujuhook."""
