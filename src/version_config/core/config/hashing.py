"""Impressão digital da configuração efetiva.

O hash identifica a configuração resolvida de um repositório e serve
para auditoria: dois repositórios (ou duas execuções) com o mesmo hash
resolvem exatamente as mesmas regras de versionamento.

Decisão: o hash é calculado sobre o mesmo dict usado pela renderização
(`effective_config_dict`), serializado em JSON canônico. A ordem de
inserção das branches, portanto, não altera o resultado.
"""

from __future__ import annotations

import hashlib
import json

from .render import effective_config_dict
from .types import Configuration


def compute_config_hash(config: Configuration) -> str:
    """
    SHA-256 hexadecimal (64 caracteres) de uma Configuration.

    Raises:
        TypeError: Se o objeto fornecido não for uma Configuration.
    """
    if not isinstance(config, Configuration):
        raise TypeError(
            f"Hash requer Configuration, recebido: {type(config).__name__}"
        )

    payload = json.dumps(
        effective_config_dict(config),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()
