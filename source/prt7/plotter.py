# plotter.py
# -*- coding: utf-8 -*-
from __future__ import annotations

from collections import deque
from typing import Dict, List, Tuple

import matplotlib.pyplot as plt

from .config import MAX_POINTS
from .reports import LoadReport, MapReport, ReportEvent
from .rotor import ALPHABET


class RotorPlotter:
    """
    Live view of a decoder session, one sample per interpreted frame.
    - top: rotor head offset (0..25)
    - bottom: decoded payload length
    Non-blocking; stops updating once the window is closed.
    """

    def __init__(self, max_points: int = MAX_POINTS, fig_size=(8, 5)):
        if not isinstance(max_points, int) or max_points <= 0:
            print(f"Warning: Invalid max_points value ({max_points}). Using default ({MAX_POINTS}).")
            max_points = MAX_POINTS
        self.max_points: int = max_points

        self.metrics: List[str] = ['head_offset', 'payload_length']
        self.styles: Dict[str, Dict[str, str]] = {
            'head_offset': {'label': 'Rotor Head Offset', 'color': 'salmon', 'drawstyle': 'steps-post'},
            'payload_length': {'label': 'Payload Length (chars)', 'color': 'skyblue', 'drawstyle': 'default'},
        }
        self.data: Dict[str, deque] = {metric: deque(maxlen=self.max_points) for metric in self.metrics}
        self.frame_idx: deque = deque(maxlen=self.max_points)
        self._current_idx_val: int = 0
        self._head_offset: int = 0
        self._payload_length: int = 0
        self.is_plot_active = True

        plt.ion()

        self.fig, axes = plt.subplots(2, 1, figsize=fig_size, sharex=True)
        self.fig.suptitle('PRT-7 Decoder Session', fontsize=12)
        self._set_window_title(self.fig, 'PRT-7 Rotor')

        self.lines: Dict[str, Tuple[plt.Axes, plt.Line2D]] = {}
        self.texts: Dict[str, plt.Text] = {}
        for ax, metric_name in zip(axes, self.metrics):
            style = self.styles[metric_name]
            ax.set_title(style['label'], fontsize=9)
            ax.grid(True, linestyle=':', alpha=0.5)
            line, = ax.plot([], [], color=style['color'], marker='.', markersize=3,
                            drawstyle=style['drawstyle'])
            text = ax.text(0.02, 0.85, '', transform=ax.transAxes, fontsize=7,
                           bbox=dict(boxstyle='round,pad=0.2', fc=ax.get_facecolor(), alpha=0.6))
            self.lines[metric_name] = (ax, line)
            self.texts[metric_name] = text
        axes[0].set_ylim(-1, len(ALPHABET))
        axes[1].set_xlabel('Frame Index', fontsize=8)
        self.fig.tight_layout(rect=[0, 0.03, 1, 0.92])

        plt.show(block=False)

    def _set_window_title(self, fig: plt.Figure, title: str):
        try:
            fig.canvas.manager.set_window_title(title)
        except AttributeError:
            pass

    def is_alive(self) -> bool:
        if not self.is_plot_active:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.is_plot_active = False
            return False
        return True

    def handle(self, event: ReportEvent) -> None:
        if isinstance(event, MapReport):
            self._head_offset = ALPHABET.index(event.head)
        elif isinstance(event, LoadReport):
            self._payload_length += 1
        else:
            return
        self.update(self._head_offset, self._payload_length)

    def update(self, head_offset: int, payload_length: int) -> None:
        if not self.is_alive(): return

        self._current_idx_val += 1
        self.frame_idx.append(self._current_idx_val)
        xs = list(self.frame_idx)

        values = {'head_offset': head_offset, 'payload_length': payload_length}
        for metric_name in self.metrics:
            self.data[metric_name].append(values[metric_name])
            ax, line = self.lines[metric_name]
            line.set_data(xs, list(self.data[metric_name]))
            label = self.styles[metric_name]['label'].split('(')[0].strip()
            if metric_name == 'head_offset':
                self.texts[metric_name].set_text(f"{label}: {head_offset} ('{ALPHABET[head_offset]}')")
            else:
                self.texts[metric_name].set_text(f"{label}: {payload_length}")
            if metric_name != 'head_offset':
                ax.relim()
                ax.autoscale_view(scalex=False, scaley=True)
            ax.set_xlim(xs[0] if len(xs) >= self.max_points else 0, xs[-1] + max(1, int(len(xs) * 0.05)))

        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

    def close(self) -> None:
        plt.ioff()
        if plt.fignum_exists(self.fig.number):
            plt.close(self.fig)
        self.is_plot_active = False
