import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import percentq.core.interfaces as I

    assert hasattr(I, "EvaluatorProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "TemplateRendererProtocol")


def test_default_implementations_satisfy_protocols():
    from percentq import MappingEvaluator, PythonEvaluator, TemplateRenderer
    from percentq.core import (
        EvaluatorProtocol,
        LoggerFactoryProtocol,
        LoggerLikeProtocol,
        TemplateRendererProtocol,
    )
    from percentq.logging.factory import DefaultLoggerFactory
    from percentq.logging.helpers import get_logger

    assert isinstance(MappingEvaluator(), EvaluatorProtocol)
    assert isinstance(PythonEvaluator(), EvaluatorProtocol)
    assert isinstance(TemplateRenderer(), TemplateRendererProtocol)
    assert isinstance(DefaultLoggerFactory(), LoggerFactoryProtocol)
    assert isinstance(get_logger("render"), LoggerLikeProtocol)


def test_renderer_logs_through_a_protocol_logger():
    from percentq import InterpolationEvaluationError, MappingEvaluator, TemplateRenderer
    from percentq.core import LoggerLikeProtocol

    class ListLogger:
        def __init__(self):
            self.records = []

        def debug(self, msg, *args, **kwargs):
            self.records.append(("debug", msg % args))

        def info(self, msg, *args, **kwargs):
            self.records.append(("info", msg % args))

        def error(self, msg, *args, **kwargs):
            self.records.append(("error", msg % args))

        def isEnabledFor(self, level):
            return True

    lg = ListLogger()
    assert isinstance(lg, LoggerLikeProtocol)

    renderer = TemplateRenderer(MappingEvaluator({}, strict=True), logger=lg)
    try:
        renderer.render_interpolated("#{x}")
    except InterpolationEvaluationError:
        pass
    else:
        raise AssertionError("strict evaluator should have failed")
    assert lg.records and lg.records[-1][0] == "debug"
    assert "'x' at offset 0" in lg.records[-1][1]
