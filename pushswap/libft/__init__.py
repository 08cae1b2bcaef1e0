"""Character, string, linked-list, output and line-reading helpers."""