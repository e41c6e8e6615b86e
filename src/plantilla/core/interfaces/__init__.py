"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- Permite invertir dependencias: el Core depende de abstracciones.
"""

from plantilla.core.interfaces.presenter import ArticlePresenter, OperatorNotifier

__all__ = ["ArticlePresenter", "OperatorNotifier"]
