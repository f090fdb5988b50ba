"""Configuration and progress helpers shared by the fsorder tools."""
