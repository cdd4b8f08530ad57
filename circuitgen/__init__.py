from .rng import RNG
from .geometry import Point, Segment, distance, interpolate, path_intersects, segments_intersect
from .sampler import candidate_pairs, poisson_disk_samples
from .paths import (
    Path,
    PathKind,
    build_path_menu,
    diagonalify,
    make_resistor,
    make_squiggles,
    manhattanize,
    pick_path,
    synthesize_path,
    zigzagify,
)
from .config import PRESETS, SceneOptions, get_scene_options, preset_options, set_scene_options
from .scene import (
    Connection,
    CurveKind,
    Node,
    NodeKind,
    Scene,
    SceneParams,
    draw_scene_params,
    generate,
    regenerate,
)
from .seeds import generate_seed_string, parse_seed, seed_from_fragment, seed_to_fragment
from .surface import RecordingSurface, Style, SvgSurface, TikzSurface
from .validate import ValidationError, check_scene

__all__ = [
    'RNG',
    'Point',
    'Segment',
    'distance',
    'interpolate',
    'path_intersects',
    'segments_intersect',
    'candidate_pairs',
    'poisson_disk_samples',
    'Path',
    'PathKind',
    'build_path_menu',
    'diagonalify',
    'make_resistor',
    'make_squiggles',
    'manhattanize',
    'pick_path',
    'synthesize_path',
    'zigzagify',
    'PRESETS',
    'SceneOptions',
    'get_scene_options',
    'preset_options',
    'set_scene_options',
    'Connection',
    'CurveKind',
    'Node',
    'NodeKind',
    'Scene',
    'SceneParams',
    'draw_scene_params',
    'generate',
    'regenerate',
    'generate_seed_string',
    'parse_seed',
    'seed_from_fragment',
    'seed_to_fragment',
    'RecordingSurface',
    'Style',
    'SvgSurface',
    'TikzSurface',
    'ValidationError',
    'check_scene',
]
