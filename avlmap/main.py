import os
import time

from avlmap.indexing import AVLTreeMap

SMOKE_COUNT = int(os.environ.get("AVLMAP_SMOKE_COUNT", "100000"))


def run_insert_and_smoke_test(count: int = SMOKE_COUNT) -> AVLTreeMap:
    print("--- AVLTreeMap insert + smoke test ---")
    tree = AVLTreeMap()

    start_time = time.time()
    for key in range(1, count + 1):
        tree.insert(key, key)
        if key % 100000 == 0:
            print(f"[smoke] Progress: {key:,} keys inserted...")
    end_time = time.time()

    print(f"[smoke] Inserted {len(tree):,} keys in {end_time - start_time:.2f}s, height={tree.height()}")
    if tree.is_empty():
        print("[smoke] No keys loaded.")
        return tree

    mid = count // 2 or 1
    print(f"[smoke] GET {mid} -> {tree.get(mid)}")
    print(f"[smoke] UPDATE {mid} -> previous {tree.insert(mid, -mid)}, now {tree.get(mid)}")

    start_time = time.time()
    removed = 0
    for key in range(1, count + 1, 2):
        if tree.remove(key) is not None:
            removed += 1
    end_time = time.time()
    print(f"[smoke] Removed {removed:,} odd keys in {end_time - start_time:.2f}s, height={tree.height()}")

    first = list(zip(range(3), tree.iter()))
    for _, (key, value) in first:
        print(f"  - key: {key}, value: {value}")
    if len(tree) > len(first):
        print("  ...")
    return tree


if __name__ == "__main__":
    run_insert_and_smoke_test()
