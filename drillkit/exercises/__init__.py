"""Worked solutions to the course drills, grouped by topic."""