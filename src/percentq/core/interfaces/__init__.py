from .evaluator import EvaluatorProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .render import TemplateRendererProtocol

__all__ = [
    'EvaluatorProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'TemplateRendererProtocol',
]
