"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest

from product_recommender.models.product import Product


RD_STATION_CATALOG: List[Dict[str, Any]] = [
    {
        "id": 1,
        "name": "RD Station CRM",
        "category": "Vendas",
        "preferences": [
            "Integração fácil com ferramentas de e-mail",
            "Personalização de funis de vendas",
            "Relatórios avançados de desempenho de vendas",
        ],
        "features": [
            "Gestão de leads e oportunidades",
            "Automação de fluxos de trabalho de vendas",
            "Rastreamento de interações com clientes",
        ],
    },
    {
        "id": 2,
        "name": "RD Station Marketing",
        "category": "Marketing",
        "preferences": [
            "Automação de marketing",
            "Testes A/B para otimização de campanhas",
            "Segmentação avançada de leads",
        ],
        "features": [
            "Criação e gestão de campanhas de e-mail",
            "Rastreamento de comportamento do usuário",
            "Análise de retorno sobre investimento (ROI) de campanhas",
        ],
    },
    {
        "id": 3,
        "name": "RD Conversas",
        "category": "Omnichannel",
        "preferences": [
            "Integração com chatbots",
            "Histórico unificado de interações",
            "Respostas automáticas e personalizadas",
        ],
        "features": [
            "Gestão de conversas em diferentes canais",
            "Chat ao vivo e atendimento em tempo real",
            "Integração com WhatsApp e redes sociais",
        ],
    },
    {
        "id": 4,
        "name": "RD Mentor AI",
        "category": "Uso de Inteligência Artificial",
        "preferences": [
            "Análise preditiva de dados",
            "Recomendações de ações com base em padrões",
            "Integração de funcionalidades preditivas nos produtos RD Station",
        ],
        "features": [
            "Análise de dados para insights estratégicos",
            "Recomendação de ações para otimização de processos",
            "Integração com outros produtos RD Station",
        ],
    },
]


def make_product(pid, name, preferences=(), features=(), category="Test") -> Product:
    return Product(
        id=pid,
        name=name,
        category=category,
        preferences=tuple(preferences),
        features=tuple(features),
    )


@pytest.fixture
def catalog() -> List[Product]:
    """The four RD Station products, in catalog order."""
    return [Product.from_dict(item) for item in RD_STATION_CATALOG]


@pytest.fixture
def tied_catalog() -> List[Product]:
    """Three products that all match the label 'test' once."""
    return [
        make_product(1, "Produto A", preferences=["test"]),
        make_product(2, "Produto B", preferences=["test"]),
        make_product(3, "Produto C", preferences=["test"]),
    ]


@pytest.fixture
def products_file(tmp_path) -> Path:
    """A catalog JSON file on disk."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(RD_STATION_CATALOG, ensure_ascii=False), encoding="utf-8")
    return path
