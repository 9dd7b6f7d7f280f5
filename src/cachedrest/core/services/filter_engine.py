"""Filter engine - composes equality predicates over the employee collection."""

from collections.abc import Callable, Iterable

from cachedrest.core.entities.query_spec import QuerySpec
from cachedrest.core.entities.records import Employee
from cachedrest.utils.numbers import parse_number

Predicate = Callable[[Employee], bool]


class FilterEngine:
    """Applies a QuerySpec to a sequence of employees.

    Every attribute set on the QuerySpec becomes one predicate and a record
    must satisfy all of them. Names compare as exact strings. Ages compare
    as numbers after both sides go through ``parse_number``; an age that is
    not numeric parses to NaN and so matches no record at all. A repeated
    parameter arrives as a tuple, which equals no name and parses to NaN.
    """

    def predicates(self, spec: QuerySpec) -> list[Predicate]:
        """Build the predicates contributed by ``spec``, in application order."""
        predicates: list[Predicate] = []

        if spec.first_name is not None:
            first_name = spec.first_name
            predicates.append(lambda e: e.first_name == first_name)

        if spec.last_name is not None:
            last_name = spec.last_name
            predicates.append(lambda e: e.last_name == last_name)

        if spec.age is not None:
            # NaN != NaN, so an unparseable or repeated age rejects every record
            age = parse_number(spec.age)
            predicates.append(lambda e: parse_number(e.age) == age)

        return predicates

    def apply(self, employees: Iterable[Employee], spec: QuerySpec) -> list[Employee]:
        """Return the employees matching every predicate, order preserved.

        Args:
            employees: Collection snapshot to filter.
            spec: Query attributes.

        Returns:
            A new list; the input is not modified.
        """
        results = list(employees)
        for predicate in self.predicates(spec):
            results = [employee for employee in results if predicate(employee)]
        return results
