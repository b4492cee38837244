"""
SVG export for note network scenes.

Produces a standalone SVG document that mirrors the on-screen network: link
edges under path arrows, nodes as circles with their truncated labels, path
position badges, and the hint line along the bottom edge.
"""

import webbrowser
from html import escape
from pathlib import Path
from typing import List

from ..view.scene import PATH_STROKE, Scene, SceneEdge, SceneNode, PathSegment

NODE_RADIUS = 12
BADGE_RADIUS = 8

SVG_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="__WIDTH__" height="__HEIGHT__" viewBox="0 0 __VB_WIDTH__ __VB_HEIGHT__" font-family="-apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif">
  <defs>
    <marker id="arrowhead" markerWidth="8" markerHeight="6" refX="14" refY="3" orient="auto">
      <polygon points="0 0, 8 3, 0 6" fill="__PATH_STROKE__" />
    </marker>
  </defs>
  <rect x="0" y="0" width="__VB_WIDTH__" height="__VB_HEIGHT__" rx="24" fill="#ffffff" fill-opacity="0.4" stroke="__FRAME_STROKE__" />
  <g class="edges">
__EDGES__
  </g>
  <g class="path">
__SEGMENTS__
  </g>
  <g class="nodes">
__NODES__
  </g>
  <text class="hint" x="__HINT_X__" y="__HINT_Y__" text-anchor="middle" font-size="7" font-weight="900" letter-spacing="1" fill="__HINT_FILL__">__HINT__</text>
</svg>
"""


def _fmt(value: float) -> str:
    return f"{value:.2f}"


def _edge(edge: SceneEdge) -> str:
    dash = f' stroke-dasharray="{edge.style.dash}"' if edge.style.dash else ""
    return (
        f'    <line data-id="{escape(edge.id)}" data-kind="{edge.kind.value}" '
        f'x1="{_fmt(edge.start.x)}" y1="{_fmt(edge.start.y)}" '
        f'x2="{_fmt(edge.end.x)}" y2="{_fmt(edge.end.y)}" '
        f'stroke="{edge.style.stroke}" stroke-width="{edge.style.width}"{dash} />'
    )


def _segment(segment: PathSegment) -> str:
    return (
        f'    <line data-step="{segment.index + 1}" '
        f'x1="{_fmt(segment.start.x)}" y1="{_fmt(segment.start.y)}" '
        f'x2="{_fmt(segment.end.x)}" y2="{_fmt(segment.end.y)}" '
        f'stroke="{PATH_STROKE}" stroke-width="3" stroke-linecap="round" '
        f'marker-end="url(#arrowhead)" />'
    )


def _node(node: SceneNode) -> str:
    ring = ' stroke="#2563eb" stroke-width="2"' if node.selected else ' stroke="#ffffff" stroke-width="2"'
    parts: List[str] = [
        f'    <g data-id="{escape(node.id)}" data-project="{escape(node.project_id)}">',
        f"      <title>{escape(node.text)}</title>",
        f'      <circle cx="{_fmt(node.x)}" cy="{_fmt(node.y)}" r="{NODE_RADIUS}" fill="{node.fill}"{ring} />',
        f'      <text x="{_fmt(node.x)}" y="{_fmt(node.y + NODE_RADIUS + 9)}" text-anchor="middle" '
        f'font-size="8" font-weight="900" fill="#4b5563">{escape(node.label)}</text>',
    ]
    if node.badge is not None:
        bx = node.x + NODE_RADIUS
        by = node.y - NODE_RADIUS
        parts.append(f'      <circle cx="{_fmt(bx)}" cy="{_fmt(by)}" r="{BADGE_RADIUS}" fill="#2563eb" />')
        parts.append(
            f'      <text x="{_fmt(bx)}" y="{_fmt(by + 3)}" text-anchor="middle" '
            f'font-size="8" font-weight="900" fill="#ffffff">{node.badge}</text>'
        )
    parts.append("    </g>")
    return "\n".join(parts)


def render_svg(scene: Scene, scale: float = 1.0) -> str:
    """
    Render a scene to an SVG document.

    The viewBox is the logical canvas; scale only changes the intrinsic size.
    """
    replacements = {
        "__WIDTH__": _fmt(scene.width * scale),
        "__HEIGHT__": _fmt(scene.height * scale),
        "__VB_WIDTH__": _fmt(scene.width),
        "__VB_HEIGHT__": _fmt(scene.height),
        "__PATH_STROKE__": PATH_STROKE,
        "__FRAME_STROKE__": "#93c5fd" if scene.checkpoint_mode else "#f3f4f6",
        "__EDGES__": "\n".join(_edge(e) for e in scene.edges),
        "__SEGMENTS__": "\n".join(_segment(s) for s in scene.segments),
        "__NODES__": "\n".join(_node(n) for n in scene.nodes),
        "__HINT_X__": _fmt(scene.width / 2),
        "__HINT_Y__": _fmt(scene.height - 8),
        "__HINT_FILL__": "#2563eb" if scene.checkpoint_mode else "#9ca3af",
        "__HINT__": escape(scene.hint.upper()),
    }

    svg = SVG_TEMPLATE
    for placeholder, value in replacements.items():
        svg = svg.replace(placeholder, value)
    return svg


def write_svg(scene: Scene, output_path: Path, scale: float = 1.0) -> Path:
    output_path.write_text(render_svg(scene, scale=scale), encoding="utf-8")
    return output_path


def open_svg(scene: Scene, output_path: str = "network.svg", scale: float = 1.0) -> str:
    """Write the scene and open it in the default browser."""
    out_file = write_svg(scene, Path(output_path), scale=scale)
    webbrowser.open(out_file.resolve().as_uri())
    return str(out_file)
