"""
Technology catalog.

Raw records in the JSON shape served by /api/technologies. Evolution links
refer to other records by id (or, in a few legacy entries, by display name).
"""
from __future__ import annotations

from typing import Any, Dict, List


TECHNOLOGY_DATABASE: List[Dict[str, Any]] = [
    {
        "id": "random-forest",
        "name": "Random Forest",
        "fullName": "Random Forest Ensemble",
        "description": "Алгоритм машинного обучения, использующий ансамбль решающих деревьев для классификации и регрессии",
        "category": "ml",
        "periods": {"start": 2001, "peak": 2015, "decline": 2020},
        "evolution": {
            "predecessors": ["decision-trees"],
            "successors": ["transformer"],
            "variants": ["extra-trees"],
        },
        "applicableModules": ["signalGeneration", "featureEngineering"],
        "advantages": [
            "Устойчивость к переобучению",
            "Работа с пропущенными данными",
            "Оценка важности признаков",
            "Быстрое обучение",
        ],
        "disadvantages": [
            "Плохо работает с линейными зависимостями",
            "Может переобучаться на шумных данных",
            "Сложность интерпретации отдельных деревьев",
        ],
        "useCases": ["Классификация направления движения цены", "Скальпинг стратегии", "Отбор признаков"],
        "sources": ["Breiman (2001)", "Chan et al. (2015-2017)"],
    },
    {
        "id": "lstm",
        "name": "LSTM",
        "fullName": "Long Short-Term Memory",
        "description": "Рекуррентная нейронная сеть, способная изучать долгосрочные зависимости во временных рядах",
        "category": "ml",
        "periods": {"start": 1997, "peak": 2018, "decline": 2022},
        "evolution": {"predecessors": ["rnn"], "successors": ["transformer"], "variants": ["gru"]},
        "applicableModules": ["signalGeneration", "marketAdaptation"],
        "advantages": [
            "Память о долгосрочных зависимостях",
            "Работа с последовательностями переменной длины",
            "Устойчивость к проблеме исчезающего градиента",
        ],
        "disadvantages": [
            "Медленное обучение",
            "Требовательность к объему данных",
            "Сложность настройки гиперпараметров",
        ],
        "useCases": [
            "Предсказание временных рядов",
            "Анализ последовательностей сделок",
            "Моделирование рыночных режимов",
        ],
        "sources": ["Hochreiter & Schmidhuber (1997)", "Zhang et al. (2017-2020)"],
    },
    {
        "id": "ccxt",
        "name": "CCXT",
        "fullName": "CryptoCurrency eXchange Trading Library",
        "description": "JavaScript/Python/PHP библиотека для подключения к криптовалютным биржам",
        "category": "data",
        "periods": {"start": 2017, "peak": 2021},
        "evolution": {"predecessors": [], "variants": ["ccxt-pro"]},
        "applicableModules": ["dataCollection", "execution"],
        "advantages": [
            "Единый интерфейс для множества бирж",
            "Поддержка WebSocket",
            "Активное сообщество",
            "Регулярные обновления",
        ],
        "disadvantages": [
            "Зависимость от API бирж",
            "Различия в реализации между биржами",
            "Возможные лимиты на запросы",
        ],
        "useCases": ["Получение рыночных данных", "Исполнение ордеров", "Мониторинг портфеля"],
        "sources": ["CCXT Documentation", "Random Forest Scalper (2015-2017)"],
    },
    {
        "id": "transformer",
        "name": "Transformer",
        "fullName": "Transformer Architecture",
        "description": "Архитектура нейронных сетей на основе механизма внимания, революционизировавшая NLP и временные ряды",
        "category": "ml",
        "periods": {"start": 2017, "peak": 2023},
        "evolution": {"predecessors": ["lstm"], "successors": [], "variants": ["vision-transformer"]},
        "applicableModules": ["signalGeneration", "marketAdaptation", "featureEngineering"],
        "advantages": [
            "Параллелизация обучения",
            "Эффективная работа с длинными последовательностями",
            "Механизм внимания для интерпретируемости",
        ],
        "disadvantages": [
            "Высокие вычислительные требования",
            "Квадратичная сложность по длине последовательности",
            "Требует больших объемов данных",
        ],
        "useCases": [
            "Анализ стакана ордеров (LOB)",
            "Многомодальный анализ данных",
            "Предсказание временных рядов",
        ],
        "sources": ["Vaswani et al. (2017)", "LOB-Transformer (2022-2023)"],
    },
    {
        "id": "matplotlib",
        "name": "Matplotlib",
        "fullName": "Python plotting library",
        "description": "Основная библиотека для создания статических графиков в Python",
        "category": "visualization",
        "periods": {"start": 2003, "peak": 2015, "decline": 2020},
        "evolution": {"predecessors": ["excel-charts"], "successors": ["plotly"], "variants": []},
        "applicableModules": ["Визуализация и мониторинг"],
        "advantages": [
            "Полный контроль над графиками",
            "Широкие возможности настройки",
            "Интеграция с NumPy и Pandas",
        ],
        "disadvantages": [
            "Сложный синтаксис",
            "Не интерактивные графики",
            "Медленная отрисовка больших данных",
        ],
        "useCases": ["Статистические графики", "Научные публикации", "Анализ временных рядов"],
        "sources": ["Matplotlib Documentation"],
    },
    {
        "id": "plotly",
        "name": "Plotly",
        "fullName": "Interactive plotting library",
        "description": "Библиотека для создания интерактивных веб-графиков",
        "category": "visualization",
        "periods": {"start": 2012, "peak": 2020},
        "evolution": {"predecessors": ["matplotlib"], "successors": ["real-time-dashboards"], "variants": []},
        "applicableModules": ["Визуализация и мониторинг"],
        "advantages": ["Интерактивность из коробки", "Веб-готовые графики", "Поддержка 3D визуализации"],
        "disadvantages": [
            "Больший размер файлов",
            "Зависимость от JavaScript",
            "Ограничения в настройке стилей",
        ],
        "useCases": ["Интерактивные дашборды", "Веб-приложения", "Презентации данных"],
        "sources": ["Plotly Documentation"],
    },
    {
        "id": "excel-charts",
        "name": "Excel Charts",
        "fullName": "Microsoft Excel Charting",
        "description": "Стандартные инструменты создания графиков в Microsoft Excel",
        "category": "visualization",
        "periods": {"start": 1990, "peak": 2010, "decline": 2015},
        "evolution": {"successors": ["matplotlib"]},
        "applicableModules": ["Визуализация и мониторинг"],
        "advantages": ["Простота использования", "Доступность для всех", "Интеграция с таблицами"],
        "disadvantages": ["Ограниченные возможности", "Не программируемые", "Плохая масштабируемость"],
        "useCases": ["Простые отчеты", "Бизнес-презентации", "Быстрый анализ данных"],
        "sources": ["Microsoft Excel Documentation"],
    },
    {
        "id": "real-time-dashboards",
        "name": "Real-time Dashboards",
        "fullName": "Real-time Data Dashboards",
        "description": "Системы мониторинга данных в реальном времени",
        "category": "visualization",
        "periods": {"start": 2018, "peak": 2023},
        "evolution": {"predecessors": ["plotly"]},
        "applicableModules": ["Визуализация и мониторинг"],
        "advantages": [
            "Мониторинг в реальном времени",
            "Автоматическое обновление",
            "Алерты и уведомления",
        ],
        "disadvantages": [
            "Высокое потребление ресурсов",
            "Сложность настройки",
            "Требует постоянного подключения",
        ],
        "useCases": ["Торговые терминалы", "Мониторинг позиций", "Алгоритмическая торговля"],
        "sources": ["Trading Systems Documentation"],
    },
    {
        "id": "decision-trees",
        "name": "Decision Trees",
        "fullName": "Decision Tree Algorithm",
        "description": "Алгоритм машинного обучения, основанный на древовидной структуре решений",
        "category": "ml",
        "periods": {"start": 1990, "peak": 2005, "decline": 2010},
        "evolution": {"successors": ["random-forest"]},
        "applicableModules": ["Генерация сигналов"],
        "advantages": [
            "Простота интерпретации",
            "Не требует нормализации данных",
            "Работает с категориальными и численными данными",
        ],
        "disadvantages": [
            "Склонность к переобучению",
            "Неустойчивость к изменениям в данных",
            "Проблемы с линейными зависимостями",
        ],
        "useCases": [
            "Классификация рыночных условий",
            "Создание торговых правил",
            "Анализ важности признаков",
        ],
        "sources": ["Quinlan (1986)", "Machine Learning Literature"],
    },
    {
        "id": "rnn",
        "name": "RNN",
        "fullName": "Recurrent Neural Networks",
        "description": "Класс нейронных сетей для работы с последовательными данными",
        "category": "ml",
        "periods": {"start": 1980, "peak": 2010, "decline": 2015},
        "evolution": {"successors": ["lstm"]},
        "applicableModules": ["Генерация сигналов"],
        "advantages": [
            "Работа с последовательностями",
            "Память о предыдущих состояниях",
            "Гибкость архитектуры",
        ],
        "disadvantages": [
            "Проблема исчезающего градиента",
            "Медленное обучение",
            "Сложность с длинными последовательностями",
        ],
        "useCases": ["Анализ временных рядов", "Предсказание последовательностей", "Обработка текста"],
        "sources": ["Rumelhart et al. (1986)"],
    },
    {
        "id": "gru",
        "name": "GRU",
        "fullName": "Gated Recurrent Unit",
        "description": "Упрощенная версия LSTM с меньшим количеством параметров",
        "category": "ml",
        "periods": {"start": 2014, "peak": 2019},
        "evolution": {"predecessors": ["lstm"]},
        "applicableModules": ["Генерация сигналов"],
        "advantages": [
            "Меньше параметров чем LSTM",
            "Быстрее обучается",
            "Хорошо работает на коротких последовательностях",
        ],
        "disadvantages": [
            "Менее выразительный чем LSTM",
            "Требует больших данных",
            "Сложность настройки",
        ],
        "useCases": [
            "Анализ коротких временных рядов",
            "Быстрое прототипирование",
            "Ресурсно-ограниченные среды",
        ],
        "sources": ["Cho et al. (2014)"],
    },
    {
        "id": "vision-transformer",
        "name": "Vision Transformer",
        "fullName": "Vision Transformer (ViT)",
        "description": "Адаптация архитектуры Transformer для обработки изображений",
        "category": "ml",
        "periods": {"start": 2020, "peak": 2024},
        "evolution": {"predecessors": ["transformer"]},
        "applicableModules": ["Обработка данных"],
        "advantages": [
            "Превосходная производительность на больших данных",
            "Масштабируемость",
            "Применимость к различным задачам",
        ],
        "disadvantages": [
            "Требует огромные объемы данных",
            "Высокие вычислительные затраты",
            "Сложность интерпретации",
        ],
        "useCases": [
            "Анализ графиков и чартов",
            "Распознавание паттернов на изображениях",
            "Обработка визуальных данных о рынке",
        ],
        "sources": ["Dosovitskiy et al. (2020)"],
    },
    {
        "id": "ccxt-pro",
        "name": "CCXT Pro",
        "fullName": "CCXT Professional",
        "description": "Профессиональная версия CCXT с поддержкой WebSocket и расширенными возможностями",
        "category": "data",
        "periods": {"start": 2019, "peak": 2023},
        "evolution": {"predecessors": ["ccxt"]},
        "applicableModules": ["Сбор данных", "Исполнение сделок"],
        "advantages": [
            "WebSocket соединения",
            "Низкая задержка",
            "Расширенная функциональность",
            "Профессиональная поддержка",
        ],
        "disadvantages": ["Платная лицензия", "Более сложная настройка", "Зависимость от поставщика"],
        "useCases": [
            "Высокочастотная торговля",
            "Real-time мониторинг",
            "Профессиональные торговые системы",
        ],
        "sources": ["CCXT Pro Documentation"],
    },
    {
        "id": "extra-trees",
        "name": "Extra Trees",
        "fullName": "Extremely Randomized Trees",
        "description": "Вариант Random Forest с дополнительной рандомизацией при выборе разбиений",
        "category": "ml",
        "periods": {"start": 2006, "peak": 2016},
        "evolution": {"predecessors": ["random-forest"]},
        "applicableModules": ["Генерация сигналов"],
        "advantages": ["Быстрее Random Forest", "Меньше переобучения", "Хорошая производительность"],
        "disadvantages": [
            "Менее точный чем Random Forest",
            "Сложность интерпретации",
            "Требует настройки параметров",
        ],
        "useCases": ["Быстрая классификация", "Большие датасеты", "Ансамблевые методы"],
        "sources": ["Geurts et al. (2006)"],
    },
    {
        "id": "pandas",
        "name": "Pandas",
        "fullName": "Python Data Analysis Library",
        "description": "Библиотека для работы с табличными данными и временными рядами в Python",
        "category": "processing",
        "periods": {"start": 2008, "peak": 2018},
        "evolution": {"predecessors": ["Excel"], "successors": ["polars"]},
        "applicableModules": ["Обработка данных", "Feature Engineering"],
        "advantages": [
            "Удобные операции с временными рядами",
            "Богатая экосистема",
            "Интеграция с NumPy и scikit-learn",
        ],
        "disadvantages": [
            "Однопоточная обработка",
            "Высокое потребление памяти",
            "Медленная работа на больших данных",
        ],
        "useCases": ["Подготовка OHLCV данных", "Расчёт технических индикаторов", "Бэктестинг"],
        "sources": ["McKinney (2010)", "Pandas Documentation"],
    },
    {
        "id": "numpy",
        "name": "NumPy",
        "fullName": "Numerical Python",
        "description": "Базовая библиотека численных вычислений и многомерных массивов в Python",
        "category": "processing",
        "periods": {"start": 2006, "peak": 2016},
        "evolution": {"successors": ["pandas"]},
        "applicableModules": ["Обработка данных", "Feature Engineering"],
        "advantages": ["Векторизованные вычисления", "Высокая скорость", "Стандарт де-факто"],
        "disadvantages": ["Нет поддержки GPU из коробки", "Низкоуровневый API"],
        "useCases": ["Матричные вычисления", "Расчёт доходностей", "Статистические признаки"],
        "sources": ["Harris et al. (2020)"],
    },
    {
        "id": "polars",
        "name": "Polars",
        "fullName": "Polars DataFrame Library",
        "description": "Высокопроизводительная библиотека датафреймов на Rust с ленивыми вычислениями",
        "category": "processing",
        "periods": {"start": 2020, "peak": 2024},
        "evolution": {"predecessors": ["pandas"]},
        "applicableModules": ["Обработка данных"],
        "advantages": ["Многопоточность", "Ленивые вычисления", "Низкое потребление памяти"],
        "disadvantages": ["Молодая экосистема", "Отличия API от Pandas"],
        "useCases": ["Обработка тиковых данных", "Быстрая агрегация свечей"],
        "sources": ["Polars Documentation"],
    },
    {
        "id": "scikit-learn",
        "name": "Scikit-learn",
        "fullName": "scikit-learn Machine Learning in Python",
        "description": "Библиотека классических алгоритмов машинного обучения для Python",
        "category": "ml",
        "periods": {"start": 2010, "peak": 2017},
        "evolution": {"predecessors": ["Decision Trees"]},
        "applicableModules": ["Генерация сигналов", "Feature Engineering"],
        "advantages": ["Единый API моделей", "Большой набор алгоритмов", "Подробная документация"],
        "disadvantages": ["Нет глубокого обучения", "Ограниченная работа с GPU"],
        "useCases": ["RandomForestClassifier", "Отбор признаков", "Кросс-валидация"],
        "sources": ["Pedregosa et al. (2011)"],
    },
    {
        "id": "twap-vwap",
        "name": "TWAP/VWAP",
        "fullName": "Time/Volume Weighted Average Price",
        "description": "Алгоритмы исполнения, распределяющие крупный ордер во времени или по объёму",
        "category": "execution",
        "periods": {"start": 2005, "peak": 2021},
        "evolution": {"successors": ["rl-execution"]},
        "applicableModules": ["Исполнение сделок"],
        "advantages": ["Снижение рыночного воздействия", "Простота реализации", "Прозрачный бенчмарк"],
        "disadvantages": ["Предсказуемость для других участников", "Не учитывает краткосрочную ликвидность"],
        "useCases": ["Исполнение крупных ордеров", "Ребалансировка портфеля"],
        "sources": ["Berkowitz et al. (1988)"],
    },
    {
        "id": "rl-execution",
        "name": "RL Execution",
        "fullName": "Reinforcement Learning Order Execution",
        "description": "Оптимальное исполнение ордеров агентом обучения с подкреплением",
        "category": "execution",
        "periods": {"start": 2018, "peak": 2023},
        "evolution": {"predecessors": ["twap-vwap"]},
        "applicableModules": ["Исполнение сделок", "Адаптация к рынку"],
        "advantages": ["Учитывает состояние стакана", "Адаптация к ликвидности"],
        "disadvantages": ["Сложное обучение", "Риск переобучения на истории"],
        "useCases": ["Исполнение на криптобиржах", "Маркет-мейкинг"],
        "sources": ["Nevmyvaka et al. (2006)", "Ning et al. (2018)"],
    },
    {
        "id": "var-models",
        "name": "VaR Models",
        "fullName": "Value at Risk",
        "description": "Оценка максимальных потерь портфеля с заданной вероятностью на горизонте",
        "category": "risk",
        "periods": {"start": 1994, "peak": 2012},
        "evolution": {"successors": ["Adaptive Risk Models"]},
        "applicableModules": ["Риск-менеджмент"],
        "advantages": ["Единая метрика риска", "Регуляторный стандарт"],
        "disadvantages": ["Недооценка хвостовых рисков", "Предположения о распределении"],
        "useCases": ["Лимиты позиций", "Отчётность по рискам"],
        "sources": ["J.P. Morgan RiskMetrics (1994)"],
    },
    {
        "id": "regime-detection",
        "name": "Regime Detection",
        "fullName": "Market Regime Detection",
        "description": "Выявление рыночных режимов (тренд, флэт, высокая волатильность) для переключения стратегий",
        "category": "adaptation",
        "periods": {"start": 2010, "peak": 2019},
        "evolution": {"successors": ["online-learning"]},
        "applicableModules": ["Адаптация к рынку"],
        "advantages": ["Переключение стратегий по режиму", "Снижение просадок"],
        "disadvantages": ["Запаздывание определения режима", "Ложные переключения"],
        "useCases": ["Hidden Markov Models", "Фильтрация сигналов по режиму"],
        "sources": ["Hamilton (1989)"],
    },
    {
        "id": "online-learning",
        "name": "Online Learning",
        "fullName": "Online Machine Learning",
        "description": "Инкрементальное дообучение моделей по мере поступления новых данных",
        "category": "adaptation",
        "periods": {"start": 2016, "peak": 2022},
        "evolution": {"predecessors": ["regime-detection"]},
        "applicableModules": ["Адаптация к рынку"],
        "advantages": ["Быстрая реакция на смену рынка", "Нет полного переобучения"],
        "disadvantages": ["Катастрофическое забывание", "Сложность мониторинга качества"],
        "useCases": ["Потоковые модели сигналов", "Адаптивные пороги"],
        "sources": ["Online Learning Literature"],
    },
    {
        "id": "docker",
        "name": "Docker",
        "fullName": "Docker Containers",
        "description": "Контейнеризация торговых сервисов для воспроизводимого развёртывания",
        "category": "infrastructure",
        "periods": {"start": 2013, "peak": 2019},
        "evolution": {"successors": ["kubernetes"]},
        "applicableModules": [],
        "advantages": ["Воспроизводимые окружения", "Быстрое развёртывание"],
        "disadvantages": ["Накладные расходы на сеть", "Сложность отладки"],
        "useCases": ["Развёртывание ботов", "Изоляция бэктестов"],
        "sources": ["Docker Documentation"],
    },
    {
        "id": "kubernetes",
        "name": "Kubernetes",
        "fullName": "Kubernetes Container Orchestration",
        "description": "Оркестрация контейнеров для масштабирования торговой инфраструктуры",
        "category": "infrastructure",
        "periods": {"start": 2015, "peak": 2021},
        "evolution": {"predecessors": ["docker"]},
        "applicableModules": [],
        "advantages": ["Автомасштабирование", "Самовосстановление сервисов"],
        "disadvantages": ["Высокий порог входа", "Операционная сложность"],
        "useCases": ["Кластеры исследовательских задач", "Отказоустойчивые сервисы данных"],
        "sources": ["Kubernetes Documentation"],
    },
]


__all__ = ["TECHNOLOGY_DATABASE"]
