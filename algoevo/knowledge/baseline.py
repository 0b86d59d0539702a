"""
Hand-authored baseline matrix: one row per trading-machine module, five
revision cells each. Row order is the order shown by the UI.
"""
from __future__ import annotations

from typing import Any, Dict, List


def _cell(tech: str, period: str, desc: str) -> Dict[str, str]:
    return {"tech": tech, "period": period, "desc": desc}


BASELINE_MODULES: List[Dict[str, Any]] = [
    {
        "name": "Сбор данных",
        "revisions": {
            "rev1": _cell("Reuters API, Bloomberg", "early", "Базовые рыночные данные через API"),
            "rev2": _cell("WebSocket, FIX, CCXT", "early", "Данные в реальном времени + криптобиржи"),
            "rev3": _cell("Market Data Lakes", "modern", "Централизованные хранилища рыночных данных"),
            "rev4": _cell("Streaming Analytics", "modern", "Потоковая обработка данных"),
            "rev5": _cell("Multi-modal Data", "current", "Объединение различных типов данных"),
        },
    },
    {
        "name": "Обработка данных",
        "revisions": {
            "rev1": _cell("Excel, CSV", "early", "Ручная обработка в табличных редакторах"),
            "rev2": _cell("Pandas, NumPy", "early", "Python библиотеки для анализа данных"),
            "rev3": _cell("Apache Spark", "modern", "Распределённая обработка больших данных"),
            "rev4": _cell("Polars, DuckDB", "modern", "Высокопроизводительная аналитика"),
            "rev5": _cell("Ray, Dask", "current", "Масштабируемые вычисления"),
        },
    },
    {
        "name": "Feature Engineering",
        "revisions": {
            "rev1": _cell("Technical Indicators", "early", "RSI, MACD, SMA - классические индикаторы"),
            "rev2": _cell("Statistical Features", "early", "Волатильность, корреляции, возвраты"),
            "rev3": _cell("Auto Feature Selection", "modern", "Автоматический отбор признаков"),
            "rev4": _cell("Graph Features", "modern", "Признаки на основе графов"),
            "rev5": _cell("Learned Representations", "current", "Обученные представления данных"),
        },
    },
    {
        "name": "Генерация сигналов",
        "revisions": {
            "rev1": _cell("Rule-based", "early", "Системы на основе правил"),
            "rev2": _cell("SVM, Random Forest", "early", "Классические алгоритмы ML"),
            "rev3": _cell("LSTM, CNN", "modern", "Глубокие нейронные сети"),
            "rev4": _cell("Transformer LOB", "modern", "Трансформеры для анализа стакана"),
            "rev5": _cell("Multi-Agent RL", "current", "Многоагентное обучение с подкреплением"),
        },
    },
    {
        "name": "Риск-менеджмент",
        "revisions": {
            "rev1": _cell("Fixed Stop-Loss", "early", "Фиксированные уровни стоп-лосс"),
            "rev2": _cell("VaR Models", "early", "Модели стоимости под риском"),
            "rev3": _cell("Dynamic Hedging", "modern", "Динамическое хеджирование"),
            "rev4": _cell("RL-based Risk", "modern", "Риск-менеджмент на основе RL"),
            "rev5": _cell("Adaptive Risk Models", "current", "Адаптивные модели управления рисками"),
        },
    },
    {
        "name": "Исполнение сделок",
        "revisions": {
            "rev1": _cell("Market Orders", "early", "Простые рыночные ордера"),
            "rev2": _cell("Smart Routing", "early", "Умная маршрутизация ордеров"),
            "rev3": _cell("TWAP/VWAP", "modern", "Алгоритмы исполнения TWAP/VWAP"),
            "rev4": _cell("RL Execution", "modern", "Исполнение на основе RL"),
            "rev5": _cell("Game-theoretic", "current", "Игровые стратегии исполнения"),
        },
    },
    {
        "name": "Адаптация к рынку",
        "revisions": {
            "rev1": _cell("", "empty", "Отсутствие адаптации"),
            "rev2": _cell("Regime Detection", "early", "Детекция режимов рынка"),
            "rev3": _cell("Online Learning", "modern", "Онлайн обучение"),
            "rev4": _cell("Meta-Learning", "modern", "Мета-обучение"),
            "rev5": _cell("Continual Learning", "current", "Непрерывное обучение"),
        },
    },
    {
        "name": "Визуализация и мониторинг",
        "revisions": {
            "rev1": _cell("Excel Charts", "early", "Простые графики в Excel"),
            "rev2": _cell("Matplotlib, R", "early", "Программная визуализация данных"),
            "rev3": _cell("Plotly, D3.js", "modern", "Интерактивные веб-дашборды"),
            "rev4": _cell("Real-time Dashboards", "modern", "Мониторинг в реальном времени"),
            "rev5": _cell("AI-powered Analytics", "current", "ИИ-анализ паттернов и аномалий"),
        },
    },
]


__all__ = ["BASELINE_MODULES"]
