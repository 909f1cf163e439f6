"""Core de isdayoff: dominio, contratos, configuración y servicios.

El Core no conoce httpx ni la CLI; los adaptadores implementan sus contratos.
"""
