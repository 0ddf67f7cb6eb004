"""Configuration layer: settings models, config discovery, and logging setup.

Feeds the CLI only. Guard functions never read configuration.
"""
