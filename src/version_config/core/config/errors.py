"""
Exceções canônicas da camada de configuração de versionamento.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, a detecção de chaves legadas e a resolução da
configuração efetiva de um repositório.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros de configuração são falhas fatais (nenhuma configuração parcial)
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Erros com `code` expõem um identificador estável (não é texto livre)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não faz migração automática de documentos antigos
"""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence


# Catálogo de códigos estáveis de erro
OLD_CONFIGURATION = "OldConfiguration"
INVALID_ENUM_VALUE = "InvalidEnumValue"

OLD_CONFIGURATION_HEADER = (
    "GitVersionConfig.yaml contains old configuration, please fix the following errors:"
)


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração de versionamento.

    Todas as exceções levantadas durante carregamento, validação de
    chaves legadas e resolução de configuração herdam desta classe.
    """

    code: str = "ConfigError"


class OldConfigurationError(ConfigError):
    """
    Documento contém chaves de um layout de configuração obsoleto.

    A mensagem é composta por um cabeçalho fixo seguido de uma linha por
    violação, na ordem em que as chaves aparecem no documento.

    Decisões arquiteturais:
        - Todas as violações são agregadas em uma única falha
        - Nenhuma migração silenciosa é aplicada

    Invariantes:
        - `violations` nunca é vazio
    """

    code = OLD_CONFIGURATION

    def __init__(self, violations: Sequence[str]) -> None:
        self.violations: List[str] = list(violations)
        super().__init__("\n".join([OLD_CONFIGURATION_HEADER, *self.violations]))


class InvalidEnumValueError(ConfigError):
    """Valor fora do domínio permitido para um campo enumerado."""

    code = INVALID_ENUM_VALUE

    def __init__(self, field: str, value: Any, allowed: Iterable[str]) -> None:
        self.field = field
        self.value = value
        self.allowed: List[str] = list(allowed)
        super().__init__(
            f"Invalid value '{value}' for '{field}'. "
            f"Allowed values: {', '.join(self.allowed)}"
        )


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato do arquivo de configuração não suportado pelo loader.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """Conteúdo raiz do documento não é um mapeamento (`dict`)."""


class ConfigParseError(ConfigError):
    """Falha ao parsear YAML/JSON."""
