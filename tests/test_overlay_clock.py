from __future__ import annotations

import logging

import pytest

from core.clock import Clock, ManualTimeSource
from core.frame_loop import ManualScheduler, PygameScheduler
from landing.input_state import InputState, Viewport
from logging_config import LOGGER_NAMESPACES, setup_logging
from ui.section_overlay import SectionOverlay
from ui.text_renderer import aligned_origin, quad_vertices


def test_overlay_top_of_page() -> None:
    overlay = SectionOverlay(("A", "B", "C"), margin=0.1)
    placements = overlay.heading_positions(InputState(viewport=Viewport(1000, 800)))
    assert [(p.title, p.y) for p in placements] == [("A", 400.0), ("B", 1200.0)]
    assert placements[0].x == pytest.approx(100.0)
    assert placements[0].align == "midleft"
    assert placements[1].x == pytest.approx(900.0)
    assert placements[1].align == "midright"


def test_overlay_headings_scroll_up() -> None:
    overlay = SectionOverlay(("A", "B", "C"))
    state = InputState(viewport=Viewport(1000, 800), scroll_y=800.0)
    placements = overlay.heading_positions(state)
    assert [(p.section, p.y) for p in placements] == [(0, -400.0), (1, 400.0), (2, 1200.0)]


def test_clock_starts_lazily() -> None:
    source = ManualTimeSource(5.0)
    clock = Clock(source)
    assert not clock.running
    assert clock.get_elapsed_time() == 0.0
    assert clock.running
    source.advance(1.5)
    assert clock.get_elapsed_time() == pytest.approx(1.5)


def test_clock_restart_resets_origin() -> None:
    source = ManualTimeSource()
    clock = Clock(source)
    clock.start()
    source.advance(3.0)
    clock.start()
    assert clock.get_elapsed_time() == 0.0


def test_manual_time_only_moves_forward() -> None:
    with pytest.raises(ValueError):
        ManualTimeSource().advance(-0.1)


def test_manual_scheduler_defers_requests_made_while_stepping() -> None:
    scheduler = ManualScheduler()
    calls = []

    def frame() -> None:
        calls.append(len(calls))
        if len(calls) < 3:
            scheduler.request_frame(frame)

    scheduler.request_frame(frame)
    assert scheduler.step() == 1
    assert calls == [0]
    assert scheduler.pending == 1
    assert scheduler.run(10) == 2
    assert calls == [0, 1, 2]
    assert scheduler.frames_run == 3


@pytest.fixture()
def restore_loggers():
    yield
    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.propagate = True
        logger.setLevel(logging.NOTSET)


def test_setup_logging_accepts_level_names(restore_loggers) -> None:
    setup_logging("debug")
    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert not logger.propagate


def test_setup_logging_twice_keeps_one_handler(restore_loggers, tmp_path) -> None:
    setup_logging(logging.INFO, log_file=str(tmp_path / "run.log"))
    setup_logging(logging.INFO, log_file=str(tmp_path / "run.log"))
    assert len(logging.getLogger("core").handlers) == 2
    for handler in logging.getLogger("core").handlers:
        handler.close()


def test_setup_logging_rejects_unknown_level(restore_loggers) -> None:
    with pytest.raises(ValueError):
        setup_logging("chatty")


@pytest.mark.parametrize(
    "align, expected",
    [
        ("topleft", (100.0, 50.0)),
        ("topright", (60.0, 50.0)),
        ("midleft", (100.0, 40.0)),
        ("midright", (60.0, 40.0)),
        ("center", (80.0, 40.0)),
    ],
)
def test_label_alignment(align: str, expected) -> None:
    assert aligned_origin(100.0, 50.0, 40.0, 20.0, align) == expected


def test_quad_vertices_clockwise_from_top_left() -> None:
    quad = quad_vertices(10.0, 20.0, 30.0, 5.0)
    assert quad.tolist() == [[10.0, 20.0], [40.0, 20.0], [40.0, 25.0], [10.0, 25.0]]


def test_pygame_scheduler_queues_without_running() -> None:
    scheduler = PygameScheduler(fps=30, vsync=False)
    scheduler.request_frame(lambda: None)
    scheduler.request_frame(lambda: None)
    assert scheduler.pending == 2
    # Nothing has ticked the clock yet
    assert scheduler.get_fps() == 0.0
