import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from src.components import (
    control_flow,
    conversions,
    functions,
    gradebook,
    grading,
    profiles,
    tuples,
)
from src.domain import ABSENT, Err, Present, compact, from_nullable
from src.rules.loader import DEFAULT_RULES_PATH, load_rules, load_rules_or_default
from src.rules.models import Rules

logger = logging.getLogger("cli")

Renderer = Callable[[Rules], list[str]]


def get_rules(path: str | None) -> Rules:
    if path is None:
        return load_rules_or_default(DEFAULT_RULES_PATH)
    return load_rules(Path(path))


def heading(title: str) -> str:
    return f"\n=== {title} ==="


# --- Pages ---


def render_conversions(rules: Rules) -> list[str]:
    lines = [heading("Basic Types")]

    lines.append(f"2 as text: {conversions.int_to_text(2)!r}")
    lines.append(f"'5' as int: {conversions.parse_int('5').unwrap_or('not a number')}")
    lines.append(f"'five' as int: {conversions.parse_int('five').unwrap_or('not a number')}")
    lines.append(f"3.14159 as int: {conversions.truncate_to_int(3.14159)}")
    lines.append(f"42 as float: {conversions.int_to_float(42)}")

    facts = conversions.string_facts("Raghu", "Rag")
    lines.append(f"{facts.text!r} has {facts.length} characters ({facts.upper} / {facts.lower})")
    if facts.contains_term:
        lines.append(f"yes, the search term {facts.term!r} is in {facts.text!r}")
    else:
        lines.append("no search term in the name")

    for a, b in ((10, 3), (10, 0)):
        summary = conversions.describe_arithmetic(a, b)
        lines.append(
            f"{a} and {b}: sum {summary.total}, difference {summary.difference}, "
            f"product {summary.product}"
        )
        match summary.quotient, summary.true_quotient, summary.remainder:
            case Present(value=q), Present(value=exact), Present(value=r):
                shown = conversions.round_to_places(exact, 3)
                lines.append(f"  quotient {q}, true quotient {shown}, remainder {r}")
            case _:
                lines.append("  cannot divide by zero")

    lines.append("Analysis helper:")
    for check in conversions.check_values(["42", "3.14159", "Hello", "-273.15", ""]):
        match check.rounded:
            case Present(value=rounded):
                lines.append(f"  {check.raw!r}: numeric, rounded {rounded}")
            case _:
                lines.append(f"  {check.raw!r}: not numeric")
    return lines


def render_profiles(rules: Rules) -> list[str]:
    cfg = rules.profiles
    lines = [heading("User Profiles")]

    created = profiles.run_create(
        profiles.CreateUserInput(
            user_id=12345,
            name="Alice",
            age=25,
            email="Alice@Example.com",
            address=Present(profiles.Address(street="Main St", city="Boston")),
        ),
        cfg,
    )
    lines.extend(created.messages)

    rejected = profiles.run_create(
        profiles.CreateUserInput(user_id=2, name="", age=10, email="invalid"), cfg
    )
    lines.extend(f"UserError: {m}" for m in rejected.messages)

    if created.user is None:
        return lines
    alice = created.user
    lines.extend(profiles.summarize_user(alice, cfg))

    update = profiles.run_update(
        alice, profiles.UpdateUserInput(age=Present(26), email=Present("alice@new.example")), cfg
    )
    lines.extend(update.messages)
    bad_update = profiles.run_update(alice, profiles.UpdateUserInput(age=Present(5)), cfg)
    lines.extend(f"Rejected: {m}" for m in bad_update.messages)

    bob = profiles.User(id=2, name="Bob", age=30)
    lines.append(f"Alice's city: {profiles.city_of(alice, cfg.default_city)}")
    lines.append(f"Bob's city: {profiles.city_of(bob, cfg.default_city)}")

    for candidate in ("alice@example.com", "heshu"):
        result = profiles.validate_email(candidate, cfg.email_required_char)
        if isinstance(result, Err):
            reason = result.error.message(required_char=cfg.email_required_char)
            lines.append(f"{candidate!r}: {reason}")
        else:
            lines.append(f"{candidate!r}: valid ({result.value})")

    lines.append(f"Display name: {profiles.display_name(ABSENT, ABSENT, cfg.default_display_name)}")
    lines.append(profiles.greet_user(Present("Raghu"), ABSENT))

    numbers = from_nullable([1, 2, 3, 4, 5])
    scores = from_nullable({"Alice": 95, "Bob": 87})
    unset: list[int] | None = None
    first = numbers.and_then(lambda ns: from_nullable(ns[0] if ns else None))
    alice_score = scores.and_then(lambda s: from_nullable(s.get("Alice")))
    lines.append(f"Number count: {numbers.map(len).unwrap_or(0)}")
    lines.append(f"First number: {first.unwrap_or('none')}")
    lines.append(f"Alice's score: {alice_score.unwrap_or('none')}")
    lines.append(f"Unset list count: {len(from_nullable(unset).unwrap_or([]))}")
    raw = [1, None, 3, None, 5]
    lines.append(f"Valid numbers: {compact([from_nullable(v) for v in raw])}")
    return lines


def render_control_flow(rules: Rules) -> list[str]:
    cfg = rules.control_flow
    lines = [heading("Control Flow")]

    for op, outcome in control_flow.compare(10, 20).items():
        lines.append(f"10 {op} 20: {outcome}")

    alice = control_flow.Person(name="Alice", age=25)
    bob = control_flow.Person(name="Bob", age=30)
    lines.append(f"Alice older than Bob: {alice > bob}")
    lines.append(
        "By age: " + ", ".join(p.name for p in control_flow.sort_people([bob, alice]))
    )

    lines.append(control_flow.classify_parity(15))
    lines.append(control_flow.classify_quadrant(control_flow.Point(10, 20), cfg.grid_limit))
    lines.append(control_flow.classify_axis(control_flow.Point(10, 20)))
    lines.append(control_flow.classify_diagonal(control_flow.Point(5, 5)))
    lines.append(control_flow.describe_shape(control_flow.Circle(radius=5.0)))
    lines.append(f"Status: {control_flow.age_status(20, cfg.adult_age)}")
    fallback = control_flow.coalesce(ABSENT, ABSENT, default=rules.profiles.default_display_name)
    lines.append(f"Display name: {fallback}")
    lines.append(control_flow.greeting_for(Present("John")))
    lines.append(control_flow.greeting_for(ABSENT))
    return lines


def render_functions(rules: Rules) -> list[str]:
    lines = [heading("Functions")]

    lines.append(functions.greeting("Vamsi"))
    pair = functions.name_and_age()
    lines.append(f"{pair.name} is {pair.age}")
    lines.append(f"sum(1, 2, 3) = {functions.sum_all(1, 2, 3)}")
    lines.append(f"process_number(11) = {functions.process_number(11)}")
    product = functions.calculate(2, 3, functions.OPERATIONS["multiply"])
    lines.append(f"calculate(2, 3, multiply) = {product}")
    add_five = functions.make_adder(5)
    lines.append(f"add_five(10) = {add_five(10)}")

    students = [functions.Student(name="Alice"), functions.Student(name="Bob")]
    planned = {"Alice": [95, 87, 92], "Bob": [78, 85, 82, 105]}
    for student in students:
        for grade in planned[student.name]:
            result = functions.add_grade(student, grade, rules.grading)
            if isinstance(result, Err):
                low, high = rules.grading.min_score, rules.grading.max_score
                lines.append(result.error.describe(grade, low, high))
            else:
                lines.append(result.value)

    for student in students:
        summary = grading.summarize_scores(student.grades, rules.grading)
        lines.append(f"\n=== {student.name}'s Report ===")
        lines.append(f"Grades: {student.grades}")
        lines.append(f"Average: {summary.display_average}")
        lines.append(f"Letter Grade: {summary.letter}")
    return lines


def render_grading(rules: Rules) -> list[str]:
    lines = [heading("Grade Calculator")]
    cfg = rules.grading

    for score in (92, 85, 65, 40, 90, 101):
        result = grading.evaluate_score(score, cfg)
        if isinstance(result, Err):
            lines.append(result.error.describe(score, cfg.min_score, cfg.max_score))
        else:
            report = result.value
            lines.append(f"{score}: {report.letter} - {report.advice}")

    empty = grading.summarize_scores([], cfg)
    lines.append(f"Average of no scores: {empty.display_average}")
    return lines


def render_gradebook(rules: Rules) -> list[str]:
    lines = [heading("Grade Book")]
    book = gradebook.GradeBook(rules.grading)

    inputs = [
        gradebook.AddGradeInput("Alice", "Math", 95),
        gradebook.AddGradeInput("Alice", "Science", 88),
        gradebook.AddGradeInput("Bob", "Math", 72),
        gradebook.AddGradeInput("Bob", "Science", 150),
        gradebook.AddGradeInput("Charlie", "Math", 84),
    ]
    outputs = gradebook.run_add_many(inputs, book)
    low, high = rules.grading.min_score, rules.grading.max_score
    for item, out in zip(inputs, outputs):
        if out.error is not None:
            reason = out.error.describe(item.score, low, high)
            lines.append(f"Rejected {item.name}/{item.subject}: {reason}")
    lines.append(f"Entries recorded: {len(book)}")

    for student in [*book.students(), "Diana"]:
        match book.average_for(student):
            case Present(value=avg):
                shown = grading.format_average(avg, rules.grading.display_places)
                lines.append(f"{student}'s average: {shown}")
            case _:
                lines.append(f"{student} has no grades")

    lines.append(f"Alice in Science: {book.grade_for('Alice', 'Science').unwrap_or('n/a')}")
    lines.append(f"Bob in Science: {book.grade_for('Bob', 'Science').unwrap_or('n/a')}")

    for subject in [*book.subjects(), "History"]:
        stats = book.class_stats(subject)
        if isinstance(stats, Present):
            s = stats.value
            shown = grading.format_average(s.average, rules.grading.display_places)
            lines.append(
                f"{subject}: average {shown}, "
                f"highest {s.highest}, lowest {s.lowest}"
            )
        else:
            lines.append(f"{subject}: no grades")
    return lines


def render_tuples(rules: Rules) -> list[str]:
    lines = [heading("Tuples")]

    for a, b in ((17, 5), (17, 0)):
        division = tuples.divide_with_remainder(a, b)
        if isinstance(division, Present):
            q, r = division.value.quotient, division.value.remainder
            lines.append(f"{a} / {b}: {q} remainder {r}")
        else:
            lines.append("cannot divide by zero")

    extremes = tuples.find_min_max([2, 34, 1, 45])
    if isinstance(extremes, Present):
        lines.append(f"min {extremes.value.min}, max {extremes.value.max}")

    points = [tuples.Coordinate(x, y) for x, y in ((1, 3), (2, 1), (1, 2), (3, 1))]
    lines.append("Sorted points: " + ", ".join(str(p) for p in tuples.sort_points(points)))

    ranked = tuples.rank_students(
        [
            tuples.StudentGrade("Alice", 95),
            tuples.StudentGrade("Bob", 87),
            tuples.StudentGrade("Charlie", 95),
            tuples.StudentGrade("Diana", 92),
        ]
    )
    lines.extend(f"{r.rank}. {r.name} ({r.grade})" for r in ranked)
    return lines


PAGES: dict[str, Renderer] = {
    "conversions": render_conversions,
    "profiles": render_profiles,
    "control-flow": render_control_flow,
    "functions": render_functions,
    "grading": render_grading,
    "gradebook": render_gradebook,
    "tuples": render_tuples,
}


def render(page: str, rules: Rules) -> list[str]:
    if page == "all":
        lines: list[str] = []
        for renderer in PAGES.values():
            lines.extend(renderer(rules))
        return lines
    return PAGES[page](rules)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Basics Bootcamp exercise pages")
    parser.add_argument(
        "page",
        nargs="?",
        default="all",
        choices=[*PAGES, "all"],
        help="Page to run (default: all)",
    )
    parser.add_argument("--rules", help=f"Path to rules file (default: {DEFAULT_RULES_PATH})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        rules = get_rules(args.rules)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return 1

    for line in render(args.page, rules):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
