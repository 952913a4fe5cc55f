"""mlcookie: build project directory structures from YAML layouts."""

from mlcookie.domain.constants import VERSION as __version__

__all__ = ["__version__"]
