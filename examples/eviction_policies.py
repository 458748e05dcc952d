#!/usr/bin/env uv run
# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "boundedcache",
# ]
#
# [tool.uv.sources]
# boundedcache = { path = "../", editable = true }
# ///

import logging

from boundedcache import CacheOptions, create_cache

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

for policy in ("lru", "lfu", "fifo"):
    cache = create_cache(CacheOptions(capacity=3, policy=policy))

    cache.put("A", 1)
    cache.put("B", 2)
    cache.put("C", 3)
    cache.get("A")
    cache.get("B")
    cache.get("B")
    cache.put("D", 4)

    print(policy, list(cache))
