"""
The lessons `mindset run` knows about.

Every lesson writes what it demonstrates to the `IOutput` of the graph it runs on,
so the same lesson prints to the console from the command line and lands in a
`CapturingOutput` under test.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Final, Iterable, Union

from .config import DEMO_PRICE
from .errors import UnknownLessonError
from .graph import Graph
from .interfaces import IOutput
from .linq import characters, doubled, transformed_flattened
from .output import ConsoleOutput
from .solid.open_closed.bad import Discount
from .solid.open_closed.good import RegularDiscount, VIPDiscount, apply_discount
from .solid.single_responsibility.good import EmailService, User, UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lesson:
    name: str
    title: str
    run: Callable[[Graph], None]


LESSONS: Final[dict[str, Lesson]] = {}


def lesson(name: str, title: str) -> Callable[[Callable[[Graph], None]], Callable[[Graph], None]]:
    def register(run: Callable[[Graph], None]) -> Callable[[Graph], None]:
        LESSONS[name] = Lesson(name=name, title=title, run=run)
        return run

    return register


def get_lesson(name: str) -> Lesson:
    try:
        return LESSONS[name]
    except KeyError:
        raise UnknownLessonError(name, LESSONS) from None


def build_graph(output: Union[IOutput, None] = None) -> Graph:
    graph = Graph()
    if output is None:
        graph.node(ConsoleOutput)
    else:
        graph.register_singleton(output, IOutput)
    graph.node(UserRepository)
    graph.node(EmailService)
    return graph


def run_lessons(names: Iterable[str], graph: Union[Graph, None] = None) -> None:
    lessons = [get_lesson(name) for name in names]
    if graph is None:
        graph = build_graph()
    output = graph.resolve(IOutput)

    for current in lessons:
        logger.debug("running lesson %r", current.name)
        output.write(f"== {current.title} ==")
        current.run(graph)


# ============== Lessons ===========


@lesson("linq", "Select and SelectMany")
def linq_lesson(graph: Graph) -> None:
    output = graph.resolve(IOutput)
    output.write(f"select: {doubled()}")
    output.write(f"select_many: {characters()}")
    output.write(f"select_many with select: {transformed_flattened()}")


@lesson("open-closed", "Open/Closed Principle")
def open_closed_lesson(graph: Graph) -> None:
    output = graph.resolve(IOutput)

    bad = Discount()
    for customer_type in ("Regular", "VIP", "Unknown"):
        discount = bad.calculate_discount(customer_type, DEMO_PRICE)
        output.write(f"bad {customer_type}: {discount}")

    for policy in (RegularDiscount(), VIPDiscount()):
        discount = apply_discount(policy, DEMO_PRICE)
        output.write(f"good {type(policy).__name__}: {discount}")


@lesson("single-responsibility", "Single Responsibility Principle")
def single_responsibility_lesson(graph: Graph) -> None:
    user = User(name="Alice", email="alice@example.com")

    repository = graph.resolve(UserRepository)
    repository.save_to_database(user)
    repository.update_user(user)
    repository.delete_user(user)

    emails = graph.resolve(EmailService)
    emails.send_email(user, "Hello Alice!")
    emails.send_welcome_email(user)
    emails.send_password_reset_email(user)
