import asyncio

import pytest

from meshgradient.engine.frame_ticker import FrameTicker
from meshgradient.models.color import Color
from meshgradient.models.geometry import Position
from meshgradient.models.frame import RenderFrame


class CollectingRenderer:
    def __init__(self):
        self.frames = []

    def render(self, width, height, positions, colors, smooth):
        self.frames.append((width, height, tuple(positions), tuple(colors), smooth))


class BrokenRenderer:
    def __init__(self):
        self.calls = 0

    def render(self, width, height, positions, colors, smooth):
        self.calls += 1
        raise RuntimeError("display lost")


def make_source(calls):
    def source(now):
        calls.append(now)
        return RenderFrame(
            width=2,
            height=2,
            positions=(Position(0, 0), Position(1, 0), Position(0, 1), Position(1, 1)),
            colors=(Color.from_rgb(1, 0, 0),) * 4,
            smooth=True,
            timestamp=now,
        )
    return source


def test_tick_reads_clock_once_and_pushes_to_renderers(clock):
    calls = []
    ticker = FrameTicker(make_source(calls), clock=clock)
    first = CollectingRenderer()
    second = CollectingRenderer()
    ticker.add_renderer(first)
    ticker.add_renderer(second)

    frame = ticker.tick()
    clock.advance(0.5)
    ticker.tick()

    assert calls == [100.0, 100.5]
    assert frame.timestamp == 100.0
    assert len(first.frames) == 2
    assert first.frames[0][:2] == (2, 2)
    assert first.frames[0][2] == frame.positions
    assert len(second.frames) == 2
    assert ticker.frames_rendered == 2
    assert ticker.last_frame.timestamp == 100.5


def test_failing_renderer_does_not_block_others(clock):
    ticker = FrameTicker(make_source([]), clock=clock)
    broken = BrokenRenderer()
    collector = CollectingRenderer()
    ticker.add_renderer(broken)
    ticker.add_renderer(collector)

    ticker.tick()

    assert broken.calls == 1
    assert len(collector.frames) == 1
    assert ticker.render_errors == 1


def test_renderer_registration_is_idempotent(clock):
    ticker = FrameTicker(make_source([]), clock=clock)
    collector = CollectingRenderer()

    ticker.add_renderer(collector)
    ticker.add_renderer(collector)
    assert len(ticker.renderers) == 1

    ticker.remove_renderer(collector)
    ticker.remove_renderer(collector)
    assert ticker.renderers == []


@pytest.mark.parametrize("requested,expected", [(0, 1), (30, 30), (500, 240)])
def test_fps_is_clamped(requested, expected, clock):
    ticker = FrameTicker(make_source([]), fps=requested, clock=clock)
    assert ticker.fps == expected

    ticker.set_fps(requested)
    assert ticker.fps == expected


@pytest.mark.asyncio
async def test_start_and_stop():
    calls = []
    ticker = FrameTicker(make_source(calls), fps=200)

    await ticker.start()
    await asyncio.sleep(0.05)
    await ticker.stop()

    stopped_at = len(calls)
    await asyncio.sleep(0.03)

    assert stopped_at > 0
    assert len(calls) == stopped_at
    assert ticker.running is False
    assert ticker.get_metrics()["frames_rendered"] == stopped_at


@pytest.mark.asyncio
async def test_paused_ticker_does_not_tick():
    calls = []
    ticker = FrameTicker(make_source(calls), fps=200)
    ticker.pause()

    await ticker.start()
    await asyncio.sleep(0.03)
    await ticker.stop()

    assert calls == []


@pytest.mark.asyncio
async def test_stop_without_start():
    ticker = FrameTicker(make_source([]))
    await ticker.stop()
    assert ticker.running is False
