"""Highlighters for dates, network addresses, URLs, paths, pointers, processes, times, UUIDs, keywords, numbers, regular expressions and quotes."""