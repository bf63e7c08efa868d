#!/usr/bin/env python3
"""Profile htmlfunc to find performance bottlenecks."""

import cProfile
import io
import pstats

from benchmark import htmlfunc_cards, synthetic_page

html = synthetic_page(500)

pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    htmlfunc_cards(html)

pr.disable()

s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
