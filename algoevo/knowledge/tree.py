"""
Static ML technology hierarchy served by /api/tree-data.
"""
from __future__ import annotations

from typing import Any, Dict


def _leaf(name: str, description: str) -> Dict[str, Any]:
    return {"name": name, "description": description}


TREE_DATA: Dict[str, Any] = {
    "name": "ML",
    "description": "Машинное обучение - основа современных торговых систем",
    "children": [
        {
            "name": "Traditional ML",
            "description": "Классические алгоритмы машинного обучения",
            "children": [
                _leaf("SVM", "Метод опорных векторов для классификации"),
                _leaf("Random Forest", "Ансамбль решающих деревьев"),
            ],
        },
        {
            "name": "Deep Learning",
            "description": "Глубокие нейронные сети",
            "children": [
                {
                    "name": "CNN",
                    "description": "Сверточные нейронные сети для анализа LOB",
                    "children": [_leaf("LOB-CNN", "Специализированные CNN для анализа стакана")],
                },
                {
                    "name": "RNN/LSTM",
                    "description": "Рекуррентные сети для временных рядов",
                    "children": [_leaf("Attention LSTM", "LSTM с механизмом внимания")],
                },
                {
                    "name": "Transformers",
                    "description": "Архитектура трансформеров",
                    "children": [
                        _leaf("LOB-Transformer", "Трансформеры для анализа стакана ордеров"),
                        _leaf("Time-series Transformer", "Специализированные трансформеры для временных рядов"),
                    ],
                },
            ],
        },
        {
            "name": "Reinforcement Learning",
            "description": "Обучение с подкреплением",
            "children": [
                {
                    "name": "Single-Agent RL",
                    "description": "Одноагентное обучение с подкреплением",
                    "children": [
                        _leaf("DQN", "Deep Q-Networks для торговых решений"),
                        _leaf("PPO", "Proximal Policy Optimization"),
                    ],
                },
                {
                    "name": "Multi-Agent RL",
                    "description": "Многоагентное обучение с подкреплением",
                    "children": [
                        _leaf("Competitive RL", "Соревновательное обучение агентов"),
                        _leaf("Cooperative RL", "Кооперативные стратегии"),
                    ],
                },
                _leaf("Meta-RL", "Мета-обучение с подкреплением для быстрой адаптации"),
            ],
        },
        {
            "name": "Graph Neural Networks",
            "description": "Графовые нейронные сети",
            "children": [
                _leaf("GNN LOB", "GNN для моделирования структуры стакана"),
                _leaf("Market Graph", "Графы рыночных взаимосвязей"),
            ],
        },
        {
            "name": "Hybrid Systems",
            "description": "Гибридные системы",
            "children": [
                _leaf("Rules + AI", "Комбинация правил и ИИ"),
                _leaf("Genetic + RL", "Генетические алгоритмы с RL"),
                _leaf("Ensemble Models", "Ансамбли различных моделей"),
            ],
        },
    ],
}


__all__ = ["TREE_DATA"]
