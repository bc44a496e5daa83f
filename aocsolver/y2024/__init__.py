"""Solutions to the 2024 Advent of Code puzzles, days 1 and 10 to 14."""