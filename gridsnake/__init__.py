# Grid Snake Source Package
"""
Grid Snake - Tick-driven snake game core.

Modules:
- core: Abstract interfaces for games and renderers
- games: Game implementations (Snake) and the game registry
- visualization: Terminal rendering
- utils: Configuration and logging
"""
