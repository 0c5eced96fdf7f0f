"""2D shapes, 3D solids, similarity strategies and a shape factory."""

from ._adapter import SolidAdapter as SolidAdapter
from ._collection import ShapeCollection as ShapeCollection
from ._config import DisplayParams as DisplayParams
from ._config import ShapekitConfig as ShapekitConfig
from ._config import SimilarityParams as SimilarityParams
from ._demo import run_demo as run_demo
from ._errors import InvalidParameterError as InvalidParameterError
from ._errors import ShapeError as ShapeError
from ._errors import UnknownKindError as UnknownKindError
from ._factory import ShapeKind as ShapeKind
from ._factory import create_shape as create_shape
from ._shapes import Circle as Circle
from ._shapes import Hexagon as Hexagon
from ._shapes import Pentagon as Pentagon
from ._shapes import Rectangle as Rectangle
from ._shapes import Shape as Shape
from ._similarity import AreaSimilarity as AreaSimilarity
from ._similarity import SimilarityStrategy as SimilarityStrategy
from ._similarity import TypeSimilarity as TypeSimilarity
from ._solids import Cube as Cube
from ._solids import Solid as Solid
from ._solids import Sphere as Sphere
from ._validation import validate_number as validate_number

__version__ = "0.0.0"
