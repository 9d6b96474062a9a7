"""
Пакет тестов для primforest.

Структура:
- test_graph.py - ребро и граф
- test_priority_queue.py - индексированная очередь с приоритетами
- test_prim_mst.py - алгоритм Прима
- test_graph_io.py - чтение троек и текстовый дамп
- test_random_graph.py - генерация случайных графов
- test_cli.py - командная строка

Запуск:
    pytest src/PrimForestLib/Tests -v
    pytest src/PrimForestLib/Tests -m "not stochastic"
"""
