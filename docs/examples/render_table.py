"""Render a small score table with seqextra.

Rows are kept in a tuple, edited without mutation and converted to plain
lists of text lines only when printing.
"""

import seqextra


players = ('alice', 'bob', 'carol')
scores = (12, 7, 19)

# bob scores again, dave joins in second position
scores = seqextra.update(1, lambda s: s + 5, scores)
players = seqextra.insert_at(1, 'dave', players)
scores = seqextra.insert_at(1, 0, scores)

# always show 5 rows
rows = seqextra.resizel_repeat(5, ('-', '-'), seqextra.zip(players, scores))

lines = seqextra.indexed_map_to_list(
    lambda i, row: "{:>2}. {:<8}{:>4}".format(i + 1, *row), rows)

for line in lines:
    print(line)
