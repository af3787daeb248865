from hexlattice import Cell, Direction, UNIT_GEOMETRY

start = Cell(0, 0, 0)
goal = Cell.from_offset(5, 2)

if __name__ == "__main__":
    print("goal:", goal, "offset:", goal.offset)
    print("distance:", start.distance_to(goal))
    print("line:", start.line_to(goal))
    print("ring 2:", start.ring(2))
    print("north neighbor at:", UNIT_GEOMETRY.center(start.adjacent(Direction.N)))
