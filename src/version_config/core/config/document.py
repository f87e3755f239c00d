"""
Adapter tipado sobre o documento de configuração já parseado.

O documento chega como uma árvore genérica (mapeamentos, sequências e
escalares) produzida pelo parser YAML/JSON. Este módulo expõe acessores
opcionais que distinguem:

    - chave ausente (ou valor nulo)   → None
    - chave presente com texto vazio  → ""

Essa distinção é o que permite ao merge tratar `tag: ""` como um
override explícito, e não como ausência.

Limites explícitos:
    - Não parseia texto (o parser é um colaborador externo)
    - Não valida enums nem aplica coerções de domínio
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Tuple


BRANCHES_KEY = "branches"


class ConfigDocument:
    """Visão somente leitura de um mapeamento do documento."""

    def __init__(self, data: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Mapping[str, Any] = data if isinstance(data, Mapping) else {}

    def keys(self) -> List[str]:
        """Chaves do mapeamento na ordem do documento."""
        return [str(k) for k in self._data]

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def get_str(self, key: str) -> Optional[str]:
        """
        Retorna o escalar como texto, ou None quando ausente/nulo.

        Escalares não textuais (ex.: inteiros) são convertidos com `str`.
        """
        value = self._data.get(key)
        if value is None:
            return None
        return value if isinstance(value, str) else str(value)

    def branches(self) -> List[Tuple[str, "ConfigDocument"]]:
        """Entradas de `branches` como pares (chave bruta, documento da branch)."""
        raw = self._data.get(BRANCHES_KEY)
        if not isinstance(raw, Mapping):
            return []
        return [(str(key), ConfigDocument(value)) for key, value in raw.items()]
