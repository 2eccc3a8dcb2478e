# src/iflow_artifacts/core/__init__.py
"""
Core do iflow-artifacts.

Este pacote reúne a implementação canônica do pipeline de construção
de um `Artifact` a partir de um pacote de integration flow expandido.

O core é projetado para ser:
    - determinístico
    - testável de forma isolada
    - livre de dependências de CLI ou motor de regras
    - orientado a um layout declarativo

Componentes principais:
    - config     → layout do pacote (defaults + overrides, validação, hash)
    - manifest   → parser do descritor de metadados e extração da Tag
    - parameters → parâmetros externalizados e substituição de placeholders
    - resources  → coleta de recursos tipados por diretório e sufixo
    - model      → Tag, Resource, FlowDocument e Artifact
    - assembly   → orquestração e resultado tipado
    - context    → log estruturado da construção

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda falha é uma exceção tipada
    - Resultados parciais nunca são expostos ao chamador
    - Ausência de recurso opcional é estado válido, não erro
"""
