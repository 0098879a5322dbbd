from typing import Any, Callable, Dict, Optional, Tuple, Type


class CipherPlugin:
    """
    Simple plugin interface to register named ciphers.

    Subclasses set `name` and `description` and implement `encode`/`decode`.
    Parameters the cipher does not use (shift, key, rails) are accepted and
    ignored so the dispatcher can forward the same keyword set to every plugin.
    """

    name: str = "plugin"
    description: str = ""
    params: Tuple[str, ...] = ()

    def encode(self, text: str, **params: Any) -> str:  # pragma: no cover - interface only
        raise NotImplementedError

    def decode(self, text: str, **params: Any) -> str:  # pragma: no cover - interface only
        raise NotImplementedError


_PLUGINS: Dict[str, CipherPlugin] = {}


def register_plugin(factory: Callable[[], CipherPlugin]) -> CipherPlugin:
    plugin = factory()
    _PLUGINS[plugin.name] = plugin
    return plugin


def register_cipher(cls: Type[CipherPlugin]) -> Type[CipherPlugin]:
    """Class decorator form of `register_plugin`."""
    register_plugin(cls)
    return cls


def get_plugin(name: str) -> Optional[CipherPlugin]:
    return _PLUGINS.get(name)


def list_plugins() -> Dict[str, str]:
    return {name: plugin.description for name, plugin in _PLUGINS.items()}
