# src/version_config/core/__init__.py
"""
Core do resolvedor de configuração de versionamento.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de CLI ou serviços externos

Componentes principais:
    - config → tipos, defaults, normalização de branches, merge e renderização
"""
