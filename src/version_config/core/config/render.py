"""Renderização canônica da configuração efetiva.

Produz uma representação textual (YAML) estável, usada para auditoria
e comparação com saídas aprovadas.

Decisões:
- Ordem fixa dos campos de nível raiz e de cada branch.
- Chaves de branch ordenadas lexicograficamente.
- Campos None são omitidos; "" é mantido (tag vazia explícita).
- Nenhuma coerção ou validação acontece aqui.
"""

from __future__ import annotations

from typing import Any, Dict

import yaml

from .types import BRANCH_FIELD_ALIASES, CONFIG_FIELD_ALIASES, BranchConfiguration, Configuration


def _branch_dict(branch: BranchConfiguration) -> Dict[str, Any]:
    values = {
        "versioning_mode": branch.versioning_mode.value if branch.versioning_mode is not None else None,
        "tag": branch.tag,
        "increment": branch.increment.value if branch.increment is not None else None,
    }
    return {
        BRANCH_FIELD_ALIASES[name]: value
        for name, value in values.items()
        if value is not None
    }


def effective_config_dict(config: Configuration) -> Dict[str, Any]:
    """Converte a Configuration em dict puro com ordem determinística."""
    values = {
        "assembly_versioning_scheme": config.assembly_versioning_scheme.value,
        "assembly_informational_format": config.assembly_informational_format,
        "next_version": config.next_version,
        "tag_prefix": config.tag_prefix,
        "versioning_mode": config.versioning_mode.value,
        "branches": {
            pattern: _branch_dict(config.branches[pattern])
            for pattern in sorted(config.branches)
        },
    }
    return {
        CONFIG_FIELD_ALIASES[name]: value
        for name, value in values.items()
        if value is not None
    }


def render_effective_config(config: Configuration) -> str:
    """Serializa a configuração efetiva como YAML canônico."""
    return yaml.safe_dump(
        effective_config_dict(config),
        sort_keys=False,
        default_flow_style=False,
        allow_unicode=True,
    )
