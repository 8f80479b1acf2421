"""Test package for pitchside."""
