"""Day 23: least-energy rearrangement of amphipods in a burrow.

The burrow is searched as a state space: each state is the full burrow
layout, each move sends one amphipod from a room into the hallway or from
the hallway into its own room.
"""

import logging
import re
from typing import Dict, Iterable, List, Optional, Tuple

from aoc_solver.core.data_models import PuzzleAnswer
from aoc_solver.core.errors import ParseError
from aoc_solver.search.engine import BestFirstSearcher
from aoc_solver.search.problems import SearchProblem
from .base import Puzzle

logger = logging.getLogger(__name__)

SAMPLE_INPUT = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""

UNFOLDED_ROWS = ("  #D#C#B#A#", "  #D#B#A#C#")

EMPTY = '.'
AMPHIPOD_TYPES = ('A', 'B', 'C', 'D')
ENERGY = {'A': 1, 'B': 10, 'C': 100, 'D': 1000}
HALLWAY_LENGTH = 11
# Hallway cell directly above each room, indexed like AMPHIPOD_TYPES
DOORS = (2, 4, 6, 8)
HALLWAY_STOPS = tuple(h for h in range(HALLWAY_LENGTH) if h not in DOORS)

ROOM_ROW = re.compile(r"#([A-D.])#([A-D.])#([A-D.])#([A-D.])#")

Hallway = Tuple[str, ...]
Rooms = Tuple[Tuple[str, ...], ...]
Burrow = Tuple[Hallway, Rooms]


def parse_burrow(lines: List[str]) -> Burrow:
    """Parse the burrow diagram into ``(hallway, rooms)``.

    Rooms are listed A to D, each from the slot next to the hallway down.

    Raises:
        ParseError: If the diagram is malformed
    """
    if len(lines) < 3:
        raise ParseError(f"Burrow diagram needs at least 3 lines, got {len(lines)}")

    hallway_line = lines[1].strip()
    if len(hallway_line) != HALLWAY_LENGTH + 2 or hallway_line[0] != '#' or hallway_line[-1] != '#':
        raise ParseError(f"Invalid hallway line: {lines[1]!r}")
    hallway = tuple(hallway_line[1:-1])
    if any(cell not in AMPHIPOD_TYPES + (EMPTY,) for cell in hallway):
        raise ParseError(f"Invalid hallway content: {lines[1]!r}")

    room_rows = []
    for line in lines[2:]:
        match = ROOM_ROW.search(line)
        if match is None:
            break
        room_rows.append(match.groups())
    if not room_rows:
        raise ParseError("Burrow diagram has no room rows")

    rooms = tuple(tuple(row[r] for row in room_rows) for r in range(len(AMPHIPOD_TYPES)))
    for r, room in enumerate(rooms):
        # Empty slots must all sit above the occupied ones
        if EMPTY in room[room.count(EMPTY):]:
            raise ParseError(f"Room {AMPHIPOD_TYPES[r]} has an amphipod above an empty slot: {room}")

    counts = {kind: hallway.count(kind) + sum(room.count(kind) for room in rooms)
              for kind in AMPHIPOD_TYPES}
    if any(count != len(room_rows) for count in counts.values()):
        raise ParseError(f"Each amphipod type must appear {len(room_rows)} times, got {counts}")

    return hallway, rooms


def unfold(lines: List[str]) -> List[str]:
    """Insert the two hidden room rows after the first room row."""
    return list(lines[:3]) + list(UNFOLDED_ROWS) + list(lines[3:])


def render_burrow(state: Burrow) -> str:
    """Draw a burrow state the way the puzzle input shows it."""
    hallway, rooms = state
    rows = ["#" * (HALLWAY_LENGTH + 2), "#" + "".join(hallway) + "#"]
    for depth in range(len(rooms[0])):
        cells = "#".join(room[depth] for room in rooms)
        prefix = "###" if depth == 0 else "  #"
        suffix = "###" if depth == 0 else "#"
        rows.append(prefix + cells + suffix)
    rows.append("  " + "#" * (HALLWAY_LENGTH - 2))
    return "\n".join(rows)


class RouteCache:
    """Memoised hallway cells crossed between two hallway positions.

    Owned by a single search; never shared between solves.
    """

    def __init__(self):
        self._routes: Dict[Tuple[int, int], Tuple[int, ...]] = {}
        self.hits = 0
        self.misses = 0

    def cells_between(self, source: int, target: int) -> Tuple[int, ...]:
        """Hallway cells entered when walking from ``source`` to ``target`` (target included)."""
        key = (source, target)
        route = self._routes.get(key)
        if route is not None:
            self.hits += 1
            return route
        self.misses += 1
        step = 1 if target > source else -1
        route = tuple(range(source + step, target + step, step))
        self._routes[key] = route
        return route


class AmphipodProblem(SearchProblem):
    """Burrow rearrangement as a weighted state-space search."""

    def __init__(self, initial: Burrow, use_heuristic: bool = True):
        self.initial = initial
        self.depth = len(initial[1][0])
        self.goal_rooms: Rooms = tuple((kind,) * self.depth for kind in AMPHIPOD_TYPES)
        self.use_heuristic = use_heuristic
        self.routes = RouteCache()

    def initial_state(self) -> Burrow:
        return self.initial

    def is_goal(self, state: Burrow) -> bool:
        return state[1] == self.goal_rooms

    def _hallway_clear(self, hallway: Hallway, source: int, target: int) -> bool:
        return all(hallway[h] == EMPTY for h in self.routes.cells_between(source, target))

    def successors(self, state: Burrow) -> Iterable[Tuple[Burrow, int]]:
        hallway, rooms = state

        # Hallway -> own room, only when the room holds no strangers
        for h, kind in enumerate(hallway):
            if kind == EMPTY:
                continue
            r = AMPHIPOD_TYPES.index(kind)
            room = rooms[r]
            if any(cell not in (EMPTY, kind) for cell in room):
                continue
            door = DOORS[r]
            if not self._hallway_clear(hallway, h, door):
                continue
            slot = room.count(EMPTY) - 1
            steps = abs(h - door) + slot + 1
            new_hallway = hallway[:h] + (EMPTY,) + hallway[h + 1:]
            new_room = room[:slot] + (kind,) + room[slot + 1:]
            new_rooms = rooms[:r] + (new_room,) + rooms[r + 1:]
            yield (new_hallway, new_rooms), steps * ENERGY[kind]

        # Room top -> hallway stop, only when the room still needs emptying
        for r, room in enumerate(rooms):
            top = self._top_slot(room)
            if top is None or self._is_settled(r, room, top):
                continue
            kind = room[top]
            door = DOORS[r]
            if hallway[door] != EMPTY:
                continue
            new_room = room[:top] + (EMPTY,) + room[top + 1:]
            new_rooms = rooms[:r] + (new_room,) + rooms[r + 1:]
            for h in HALLWAY_STOPS:
                if not self._hallway_clear(hallway, door, h):
                    continue
                steps = top + 1 + abs(h - door)
                new_hallway = hallway[:h] + (kind,) + hallway[h + 1:]
                yield (new_hallway, new_rooms), steps * ENERGY[kind]

    @staticmethod
    def _top_slot(room: Tuple[str, ...]) -> Optional[int]:
        for slot, cell in enumerate(room):
            if cell != EMPTY:
                return slot
        return None

    @staticmethod
    def _is_settled(room_index: int, room: Tuple[str, ...], slot: int) -> bool:
        """An amphipod is settled when it and everything below it belong in this room."""
        kind = AMPHIPOD_TYPES[room_index]
        return all(cell == kind for cell in room[slot:])

    def heuristic(self, state: Burrow) -> int:
        """Energy lower bound: each unsettled amphipod must at least reach its room.

        Never overestimates, and drops by at most the energy of any single move.
        """
        if not self.use_heuristic:
            return 0
        hallway, rooms = state
        estimate = 0
        for h, kind in enumerate(hallway):
            if kind != EMPTY:
                target = DOORS[AMPHIPOD_TYPES.index(kind)]
                estimate += (abs(h - target) + 1) * ENERGY[kind]
        for r, room in enumerate(rooms):
            for slot, kind in enumerate(room):
                if kind == EMPTY:
                    continue
                own = AMPHIPOD_TYPES.index(kind)
                if own == r:
                    if self._is_settled(r, room, slot):
                        continue
                    # Leave, step aside, come back, enter
                    steps = slot + 4
                else:
                    steps = slot + 1 + abs(DOORS[r] - DOORS[own]) + 1
                estimate += steps * ENERGY[kind]
        return estimate


class AmphipodPuzzle(Puzzle):
    day = 23
    title = "Amphipod"
    sample_input = SAMPLE_INPUT

    def _solve(self, lines: List[str], part: int) -> PuzzleAnswer:
        if part == 2:
            lines = unfold(lines)
        initial = parse_burrow(lines)
        problem = AmphipodProblem(initial, use_heuristic=bool(self.options.get('use_heuristic', True)))

        result = BestFirstSearcher(self.search_config).search(problem)
        if result.success and logger.isEnabledFor(logging.DEBUG):
            history = "\n\n".join(render_burrow(state) for state in result.path)
            logger.debug(f"Move history:\n{history}")

        details = result.to_dict()
        details['moves'] = max(len(result.path) - 1, 0)
        details['room_depth'] = problem.depth
        details['route_cache'] = {'hits': problem.routes.hits, 'misses': problem.routes.misses}
        return PuzzleAnswer(self.day, part, result.cost, details)
