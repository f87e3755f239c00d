"""
Tipos canônicos da configuração de versionamento.

Este módulo define os enums e as estruturas que representam a
configuração efetiva de um repositório após a resolução.

Componentes principais:
    - AssemblyVersioningScheme → esquema de versão de assembly
    - VersioningMode           → modo de versionamento (delivery/deployment)
    - IncrementStrategy        → estratégia de incremento por branch
    - BranchConfiguration      → regra de override por padrão de branch
    - Configuration            → configuração efetiva completa

Princípios fundamentais:
    - Enums possuem valores textuais canônicos (os mesmos do documento)
    - Campos opcionais distinguem "ausente" (None) de "vazio explícito" ("")
    - Nenhuma lógica de merge vive neste módulo

Invariantes:
    - Após o merge, `versioning_mode`, `tag_prefix` e
      `assembly_versioning_scheme` nunca são None
    - O mapa `branches` pertence exclusivamente a uma Configuration
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Type, TypeVar

from .errors import InvalidEnumValueError


E = TypeVar("E", bound=Enum)


class AssemblyVersioningScheme(str, Enum):
    """Quais componentes da versão semântica entram na versão de assembly."""

    MAJOR_MINOR_PATCH = "MajorMinorPatch"
    MAJOR_MINOR = "MajorMinor"
    MAJOR = "Major"
    NONE = "None"


class VersioningMode(str, Enum):
    """
    Modo de versionamento aplicado a uma branch.

    - CONTINUOUS_DELIVERY: a versão só avança com tag/merge explícito
    - CONTINUOUS_DEPLOYMENT: cada commit produz uma versão distinta
    """

    CONTINUOUS_DELIVERY = "ContinuousDelivery"
    CONTINUOUS_DEPLOYMENT = "ContinuousDeployment"


class IncrementStrategy(str, Enum):
    """Componente da versão incrementado por padrão em uma branch."""

    NONE = "None"
    MAJOR = "Major"
    MINOR = "Minor"
    PATCH = "Patch"


DEFAULT_INCREMENT = IncrementStrategy.PATCH


def parse_enum(enum_type: Type[E], field_name: str, raw: Any) -> E:
    """
    Converte um escalar do documento no membro correspondente do enum.

    A comparação ignora caixa e espaços nas bordas, de modo que
    `continuousDeployment` e `ContinuousDeployment` são equivalentes.

    Raises:
        InvalidEnumValueError: Se o valor não corresponde a nenhum membro.
    """
    text = str(raw).strip().lower()
    for member in enum_type:
        if member.value.lower() == text:
            return member
    raise InvalidEnumValueError(field_name, raw, [m.value for m in enum_type])


@dataclass
class BranchConfiguration:
    """
    Regra de configuração aplicada a uma família de branches.

    Campos:
    - tag: tag de pré-release; "" significa "sem tag" (explícito), None significa ausente
    - versioning_mode: modo da branch; None herda da Configuration
    - increment: estratégia de incremento; None herda de DEFAULT_INCREMENT
    """

    tag: Optional[str] = None
    versioning_mode: Optional[VersioningMode] = None
    increment: Optional[IncrementStrategy] = None


@dataclass
class Configuration:
    """
    Configuração efetiva de versionamento de um repositório.

    O mapa `branches` é indexado pelo padrão canônico (regex) da família
    de branches. A ordem de inserção é preservada, mas não participa da
    identidade de um padrão.
    """

    assembly_versioning_scheme: AssemblyVersioningScheme
    tag_prefix: str
    versioning_mode: VersioningMode
    assembly_informational_format: Optional[str] = None
    next_version: Optional[str] = None
    branches: Dict[str, BranchConfiguration] = field(default_factory=dict)

    def branch_mode(self, pattern: str) -> VersioningMode:
        """Modo efetivo da branch, herdando o modo global quando ausente."""
        mode = self.branches[pattern].versioning_mode
        return mode if mode is not None else self.versioning_mode

    def branch_increment(self, pattern: str) -> IncrementStrategy:
        increment = self.branches[pattern].increment
        return increment if increment is not None else DEFAULT_INCREMENT

    def matching_branches(self, branch_name: str) -> List[Tuple[str, BranchConfiguration]]:
        """
        Retorna as regras cujo padrão casa com um nome concreto de branch.

        A busca é `re.search` sem diferenciar caixa, na ordem do mapa.
        """
        return [
            (pattern, branch)
            for pattern, branch in self.branches.items()
            if re.search(pattern, branch_name, re.IGNORECASE)
        ]


# Chave do documento para cada campo das dataclasses
CONFIG_FIELD_ALIASES: Dict[str, str] = {
    "assembly_versioning_scheme": "assembly-versioning-scheme",
    "assembly_informational_format": "assembly-informational-format",
    "next_version": "next-version",
    "tag_prefix": "tag-prefix",
    "versioning_mode": "mode",
    "branches": "branches",
}

BRANCH_FIELD_ALIASES: Dict[str, str] = {
    "versioning_mode": "mode",
    "tag": "tag",
    "increment": "increment",
}
