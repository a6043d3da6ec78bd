"""
Game registry for Grid Snake.

Maps a game id to its game, renderer and config classes so drivers can
build a rule variant from a preset name, a config mapping or a ready
config object. Games register themselves when their package is imported.
"""

from dataclasses import replace
from typing import Any, Dict, Mapping, Optional, Type

from ..core.game_interface import GameInterface
from ..core.renderer_interface import RendererInterface


class GameRegistry:
    """
    Lookup table from game id to the classes that implement it.

    The config class must offer preset(name), from_dict(data) and
    validate(), as SnakeConfig does.
    """

    _games: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        game_class: Type[GameInterface],
        renderer_class: Type[RendererInterface],
        config_class: Type,
    ) -> None:
        """Register a game under the id from its metadata."""
        metadata = game_class.get_metadata()
        cls._games[metadata.id] = {
            'game_class': game_class,
            'renderer_class': renderer_class,
            'config_class': config_class,
            'metadata': metadata,
        }

    @classmethod
    def get_game(cls, game_id: str) -> Optional[Dict[str, Any]]:
        """Registered classes and metadata for a game, or None."""
        return cls._games.get(game_id)

    @classmethod
    def _require(cls, game_id: str) -> Dict[str, Any]:
        game_data = cls._games.get(game_id)
        if not game_data:
            raise ValueError(f"Unknown game: {game_id}")
        return game_data

    @classmethod
    def resolve_config(cls, game_id: str, config: Any = None, seed: Optional[int] = None):
        """
        Turn a variant description into a validated config object.

        Args:
            game_id: The game identifier
            config: None for defaults, a preset name, a mapping in the
                config file layout, or an instance of the config class
            seed: Replaces the config's seed when given

        Returns:
            Validated config instance (never the object passed in)

        Raises:
            ValueError: If the game is unknown or the config is invalid
            TypeError: If config is of an unsupported type
        """
        config_class = cls._require(game_id)['config_class']
        if config is None:
            resolved = config_class()
        elif isinstance(config, str):
            resolved = config_class.preset(config)
        elif isinstance(config, Mapping):
            resolved = config_class.from_dict(config)
        elif isinstance(config, config_class):
            resolved = replace(config)
        else:
            raise TypeError(f"Cannot build a {config_class.__name__} from {type(config).__name__}")

        if seed is not None:
            resolved = replace(resolved, seed=seed)
        return resolved.validate()

    @classmethod
    def create_game(cls, game_id: str, config: Any = None, seed: Optional[int] = None,
                    **kwargs) -> GameInterface:
        """
        Build a game for a rule variant.

        Args:
            game_id: The game identifier
            config: Anything resolve_config() accepts
            seed: Optional seed override
            **kwargs: Extra arguments for the game constructor

        Raises:
            ValueError: If the game is unknown or the config is invalid
        """
        game_class = cls._require(game_id)['game_class']
        return game_class(cls.resolve_config(game_id, config, seed), **kwargs)

    @classmethod
    def create_renderer(cls, game_id: str, game: Optional[GameInterface] = None,
                        **kwargs) -> RendererInterface:
        """
        Build the registered renderer for a game.

        When a game instance is given its grid size is used unless
        grid_size is passed explicitly.

        Raises:
            ValueError: If the game is unknown
        """
        renderer_class = cls._require(game_id)['renderer_class']
        if game is not None:
            kwargs.setdefault('grid_size', game.grid_size)
        return renderer_class(**kwargs)
