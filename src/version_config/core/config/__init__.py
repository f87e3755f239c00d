"""Configuração de versionamento (core).

Componentes canônicos:
 - detecção de chaves legadas
 - normalização de padrões de branch
 - merge sobre a configuração padrão
 - renderização e hashing da configuração efetiva
 - loader de `GitVersionConfig.yaml`
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigParseError,
    InvalidConfigRootTypeError,
    InvalidEnumValueError,
    OldConfigurationError,
    UnsupportedConfigFormatError,
)

from .types import (  # noqa: F401
    AssemblyVersioningScheme,
    BranchConfiguration,
    Configuration,
    IncrementStrategy,
    VersioningMode,
)

from .branches import DEVELOP_PATTERN, RELEASE_PATTERN, normalize_branch_pattern  # noqa: F401
from .defaults import DEFAULT_TAG_PREFIX, default_configuration  # noqa: F401
from .document import ConfigDocument  # noqa: F401
from .hashing import compute_config_hash  # noqa: F401
from .legacy import detect_legacy_keys, ensure_no_legacy_keys  # noqa: F401
from .loader import (  # noqa: F401
    CONFIG_FILE_NAME,
    get_effective_config_as_string,
    get_effective_config_hash,
    load_document,
    parse_document,
    provide,
)
from .merge import coerce_next_version, resolve  # noqa: F401
from .render import effective_config_dict, render_effective_config  # noqa: F401
