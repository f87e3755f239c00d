"""Normalização de chaves de branch para padrões canônicos.

O mapa de branches da configuração é indexado por um padrão regex
canônico. Usuários podem escrever apelidos curtos (`develop`,
`release[/-]`), que são convertidos aqui antes de qualquer lookup.

Regras:
- Apelidos conhecidos são comparados sem caixa e sem espaços nas bordas.
- Qualquer outra chave já é considerada canônica e é usada como está.
- A função é idempotente: padrões canônicos são pontos fixos.
"""

from __future__ import annotations

from typing import Dict


DEVELOP_PATTERN = "dev(elop)?(ment)?$"
RELEASE_PATTERN = "releases?[/-]"

_ALIASES: Dict[str, str] = {
    "dev": DEVELOP_PATTERN,
    "develop": DEVELOP_PATTERN,
    "development": DEVELOP_PATTERN,
    "release": RELEASE_PATTERN,
    "releases": RELEASE_PATTERN,
    "release/": RELEASE_PATTERN,
    "release-": RELEASE_PATTERN,
    "release[/-]": RELEASE_PATTERN,
    "releases[/-]": RELEASE_PATTERN,
}


def normalize_branch_pattern(raw_key: str) -> str:
    """Retorna o padrão canônico correspondente a uma chave de branch."""
    key = str(raw_key)
    return _ALIASES.get(key.strip().lower(), key)
