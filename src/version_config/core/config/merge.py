"""
Merge engine da configuração de versionamento.

Este módulo implementa a política oficial de resolução da configuração
efetiva: um documento de usuário, parcialmente especificado, é aplicado
sobre a configuração padrão, produzindo uma Configuration completa.

Política de merge:
    - presença vence: campo presente no documento sobrescreve o default
    - ausência herda: campo ausente (ou nulo) mantém o valor do default
    - texto vazio explícito é um valor válido (ex.: `tag: ""` remove a tag)
    - branches: merge campo a campo sobre padrões existentes, inserção
      de regra nova para padrões desconhecidos
    - chaves desconhecidas são ignoradas (compatibilidade futura)

Princípios fundamentais:
    - O merge é determinístico e puramente funcional
    - Nenhum input é mutado (o template padrão é copiado a cada chamada)
    - Chaves legadas são falha fatal antes de qualquer merge

Invariantes:
    - O retorno nunca é parcial nem None
    - A mesma entrada sempre produz Configurations iguais campo a campo

Limites explícitos:
    - Não lê arquivos nem parseia texto
    - Não interpreta histórico git nem calcula versões
"""

from __future__ import annotations

import logging
import re
from copy import deepcopy
from typing import Any, Mapping, Optional, Union

from .branches import normalize_branch_pattern
from .defaults import default_configuration
from .document import BRANCHES_KEY, ConfigDocument
from .legacy import ensure_no_legacy_keys
from .types import (
    BRANCH_FIELD_ALIASES,
    CONFIG_FIELD_ALIASES,
    AssemblyVersioningScheme,
    BranchConfiguration,
    Configuration,
    IncrementStrategy,
    VersioningMode,
    parse_enum,
)


logger = logging.getLogger(__name__)

ASSEMBLY_VERSIONING_SCHEME_KEY = CONFIG_FIELD_ALIASES["assembly_versioning_scheme"]
ASSEMBLY_INFORMATIONAL_FORMAT_KEY = CONFIG_FIELD_ALIASES["assembly_informational_format"]
NEXT_VERSION_KEY = CONFIG_FIELD_ALIASES["next_version"]
TAG_PREFIX_KEY = CONFIG_FIELD_ALIASES["tag_prefix"]
MODE_KEY = CONFIG_FIELD_ALIASES["versioning_mode"]
TAG_KEY = BRANCH_FIELD_ALIASES["tag"]
INCREMENT_KEY = BRANCH_FIELD_ALIASES["increment"]
BRANCH_MODE_KEY = BRANCH_FIELD_ALIASES["versioning_mode"]

_TOP_LEVEL_KEYS = frozenset(CONFIG_FIELD_ALIASES.values())
_BRANCH_KEYS = frozenset(BRANCH_FIELD_ALIASES.values())

_BARE_INTEGER = re.compile(r"^\d+$")


def coerce_next_version(raw: Any) -> str:
    """
    Normaliza o valor de `next-version` para texto.

    Regras:
        - inteiro (ou texto só com dígitos) → "<int>.0"
        - qualquer outro valor → texto como está

    Componentes numéricos não têm validação de faixa: `2.118998723`
    e `2.12.654651698` passam sem alteração. Conteúdo não numérico
    também passa sem erro.
    """
    if isinstance(raw, int) and not isinstance(raw, bool):
        return f"{raw}.0"
    text = raw if isinstance(raw, str) else str(raw)
    if _BARE_INTEGER.match(text.strip()):
        return f"{text.strip()}.0"
    return text


def _merge_branch(
    target: BranchConfiguration,
    document: ConfigDocument,
    pattern: str,
) -> None:
    tag = document.get_str(TAG_KEY)
    if tag is not None:
        target.tag = tag

    mode = document.get(BRANCH_MODE_KEY)
    if mode is not None:
        target.versioning_mode = parse_enum(
            VersioningMode, f"{BRANCHES_KEY}.{pattern}.{BRANCH_MODE_KEY}", mode
        )

    increment = document.get(INCREMENT_KEY)
    if increment is not None:
        target.increment = parse_enum(
            IncrementStrategy, f"{BRANCHES_KEY}.{pattern}.{INCREMENT_KEY}", increment
        )

    for key in document.keys():
        if key not in _BRANCH_KEYS:
            logger.debug("Ignoring unknown key '%s' in branch '%s'", key, pattern)


def resolve(
    document: Union[ConfigDocument, Mapping[str, Any], None],
    defaults: Optional[Configuration] = None,
) -> Configuration:
    """
    Resolve a configuração efetiva a partir de um documento e dos defaults.

    Etapas:
        1. Detecção de chaves legadas (falha agregada, antes do merge)
        2. Cópia profunda dos defaults
        3. Overlay dos escalares de nível raiz (presença vence)
        4. Coerção de `next-version`
        5. Overlay de branches com normalização de padrão

    Args:
        document: Documento parseado (mapeamento) ou ConfigDocument.
        defaults: Configuração base; quando None, usa o template padrão.

    Returns:
        Configuration: Configuração efetiva completa.

    Raises:
        OldConfigurationError: Se o documento contiver chaves legadas.
        InvalidEnumValueError: Se um campo enumerado tiver valor inválido.
    """
    doc = document if isinstance(document, ConfigDocument) else ConfigDocument(document)
    ensure_no_legacy_keys(doc)

    config = deepcopy(defaults) if defaults is not None else default_configuration()

    scheme = doc.get(ASSEMBLY_VERSIONING_SCHEME_KEY)
    if scheme is not None:
        config.assembly_versioning_scheme = parse_enum(
            AssemblyVersioningScheme, ASSEMBLY_VERSIONING_SCHEME_KEY, scheme
        )

    informational_format = doc.get_str(ASSEMBLY_INFORMATIONAL_FORMAT_KEY)
    if informational_format is not None:
        config.assembly_informational_format = informational_format

    next_version = doc.get(NEXT_VERSION_KEY)
    if next_version is not None:
        config.next_version = coerce_next_version(next_version)

    tag_prefix = doc.get_str(TAG_PREFIX_KEY)
    if tag_prefix is not None:
        config.tag_prefix = tag_prefix

    mode = doc.get(MODE_KEY)
    if mode is not None:
        config.versioning_mode = parse_enum(VersioningMode, MODE_KEY, mode)

    for key in doc.keys():
        if key not in _TOP_LEVEL_KEYS:
            logger.debug("Ignoring unknown configuration key '%s'", key)

    for raw_key, branch_doc in doc.branches():
        pattern = normalize_branch_pattern(raw_key)
        existing = config.branches.get(pattern)
        if existing is None:
            # padrão novo: nada herdado dos defaults
            existing = BranchConfiguration()
            config.branches[pattern] = existing
        _merge_branch(existing, branch_doc, pattern)

    return config
