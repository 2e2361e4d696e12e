"""
MINDSET
~~~~~~~~~~~~~~~~~~~~~

Mindset is a collection of small lessons: LINQ-style collection transformations,
and SOLID design principles shown as a bad version next to a good one.

>>> from mindset import select_many
>>> list(select_many(["Hi", "Bye"], lambda word: word))
['H', 'i', 'B', 'y', 'e']

Run `mindset list` to see the lessons, `mindset run --all` to go through them.
"""

VERSION = "0.1.0"

from .graph import Graph as Graph
from .interfaces import Addressable as Addressable
from .interfaces import IOutput as IOutput
from .interfaces import Named as Named
from .lessons import LESSONS as LESSONS
from .lessons import Lesson as Lesson
from .lessons import build_graph as build_graph
from .lessons import get_lesson as get_lesson
from .lessons import run_lessons as run_lessons
from .linq import Query as Query
from .linq import select as select
from .linq import select_many as select_many
from .output import CapturingOutput as CapturingOutput
from .output import ConsoleOutput as ConsoleOutput
from .output import LoggingOutput as LoggingOutput
