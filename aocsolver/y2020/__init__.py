"""Solutions to the 2020 Advent of Code puzzles, days 1 to 16."""