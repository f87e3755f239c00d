"""
Loader de configuração de versionamento de um repositório.

Este módulo é o colaborador fino de I/O: lê o documento do disco,
delega o parse ao PyYAML (ou ao `json`), e entrega a árvore genérica
ao merge engine.

Responsabilidades do módulo:
    - Localizar `GitVersionConfig.yaml` na raiz do repositório
    - Carregar documentos YAML ou JSON
    - Validar o tipo raiz do documento
    - Expor a configuração efetiva como objeto, como texto ou como hash

Decisões arquiteturais:
    - Arquivo ausente não é erro: a configuração padrão é usada
    - Arquivo vazio é interpretado como documento vazio
    - Escalares chegam ao merge como texto, exatamente como escritos:
      o YAML só resolve `null`, e o JSON lê números como texto.
      Assim `next-version: 2.10` não vira 2.1, `010` não vira 8
      e `tag: yes` não vira True

Limites explícitos:
    - Não aplica regras de merge (ver `merge.resolve`)
    - Não escreve arquivos
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml  # PyYAML

from .errors import (
    ConfigParseError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .merge import resolve
from .render import render_effective_config
from .types import Configuration


logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "GitVersionConfig.yaml"

# Únicas tags resolvidas implicitamente; o resto permanece str
_KEPT_IMPLICIT_TAGS = frozenset({"tag:yaml.org,2002:null", "tag:yaml.org,2002:merge"})


class _DocumentLoader(yaml.SafeLoader):
    """SafeLoader que mantém escalares como texto (exceto `null`)."""


_DocumentLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag in _KEPT_IMPLICIT_TAGS]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def parse_document(text: str) -> Dict[str, Any]:
    """
    Parseia o texto YAML de um documento de configuração.

    Raises:
        ConfigParseError: Se o YAML for inválido.
        InvalidConfigRootTypeError: Se a raiz não for um mapeamento.
    """
    try:
        data = yaml.load(text, Loader=_DocumentLoader)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(e) or "failed to parse configuration") from e
    return _ensure_mapping(data)


def _ensure_mapping(data: Any) -> Dict[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )
    return data


def load_document(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Carrega um documento de configuração a partir do disco.

    Formatos suportados:
        - YAML (.yaml, .yml)
        - JSON (.json)

    Raises:
        FileNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se a extensão não for suportada.
        ConfigParseError: Se o parse falhar.
        InvalidConfigRootTypeError: Se a raiz não for um mapeamento.
    """
    p = Path(path)
    suffix = p.suffix.lower()
    if suffix not in {".yaml", ".yml", ".json"}:
        raise UnsupportedConfigFormatError(f"Formato não suportado: {p.suffix}")

    raw = p.read_text(encoding="utf-8")

    if suffix == ".json":
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw, parse_float=str, parse_int=str)
        except json.JSONDecodeError as e:
            raise ConfigParseError(str(e)) from e
        return _ensure_mapping(data)

    return parse_document(raw)


def provide(repo_path: Union[str, Path]) -> Configuration:
    """
    Resolve a configuração efetiva de um repositório.

    Lê `<repo_path>/GitVersionConfig.yaml` quando existir; caso contrário
    retorna a configuração padrão.

    Raises:
        OldConfigurationError: Se o documento contiver chaves legadas.
        InvalidEnumValueError: Se um campo enumerado tiver valor inválido.
        ConfigParseError: Se o documento não puder ser parseado.
    """
    config_path = Path(repo_path) / CONFIG_FILE_NAME
    document: Dict[str, Any] = {}
    if config_path.exists():
        logger.info("Loading configuration from %s", config_path)
        document = load_document(config_path)

    config = resolve(document)
    logger.debug(
        "Effective configuration hash: %s",
        compute_config_hash(config),
    )
    return config


def get_effective_config_as_string(repo_path: Union[str, Path]) -> str:
    """Configuração efetiva do repositório renderizada como YAML."""
    return render_effective_config(provide(repo_path))


def get_effective_config_hash(repo_path: Union[str, Path]) -> str:
    """
    Impressão digital (SHA-256) da configuração efetiva do repositório.

    Permite comparar, entre execuções ou máquinas, se dois repositórios
    resolvem para a mesma configuração sem comparar o texto renderizado.
    """
    return compute_config_hash(provide(repo_path))
