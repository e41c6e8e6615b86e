"""Core: configuración, dominio, contratos y orquestación.

El Core no conoce la CLI; las dependencias de I/O entran por `adapters`.
"""
