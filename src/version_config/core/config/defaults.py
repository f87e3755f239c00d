"""
Configuração padrão (baseline) de versionamento.

Este módulo define o template fixo sobre o qual todo documento de
usuário é aplicado pelo merge engine.

Decisões arquiteturais:
    - O template é um objeto de módulo somente leitura
    - Consumidores recebem sempre uma cópia profunda
    - Duas regras de branch são embutidas: desenvolvimento e release

Invariantes:
    - `default_configuration()` nunca retorna o mesmo objeto duas vezes
    - Mutar o retorno não afeta chamadas subsequentes
"""

from __future__ import annotations

from copy import deepcopy

from .branches import DEVELOP_PATTERN, RELEASE_PATTERN
from .types import (
    AssemblyVersioningScheme,
    BranchConfiguration,
    Configuration,
    IncrementStrategy,
    VersioningMode,
)


DEFAULT_TAG_PREFIX = "[vV]"

_DEFAULT_TEMPLATE = Configuration(
    assembly_versioning_scheme=AssemblyVersioningScheme.MAJOR_MINOR_PATCH,
    tag_prefix=DEFAULT_TAG_PREFIX,
    versioning_mode=VersioningMode.CONTINUOUS_DELIVERY,
    assembly_informational_format=None,
    next_version=None,
    branches={
        DEVELOP_PATTERN: BranchConfiguration(
            tag="unstable",
            versioning_mode=VersioningMode.CONTINUOUS_DEPLOYMENT,
            increment=IncrementStrategy.MINOR,
        ),
        RELEASE_PATTERN: BranchConfiguration(
            tag="beta",
            versioning_mode=VersioningMode.CONTINUOUS_DELIVERY,
            increment=IncrementStrategy.PATCH,
        ),
    },
)


def default_configuration() -> Configuration:
    """Retorna uma cópia independente da configuração padrão."""
    return deepcopy(_DEFAULT_TEMPLATE)
