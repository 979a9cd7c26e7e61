from sortedcontainers import SortedSet
from sqlalchemy.sql import operators
from treeset import OrderedSet, select
import argparse
import time
import random
from faker import Faker


random.seed(42)
Faker.seed(42)
fake = Faker()

def generate_names(n, order):
    names = [fake.unique.name() for _ in range(n)]
    if order == "sorted":
        names.sort()
    return names

def make_container(container_type):
    if container_type == "tree":
        return OrderedSet()
    elif container_type == "sortedset":
        return SortedSet()
    raise ValueError("Invalid --type. Use 'tree' or 'sortedset'.")

def inserts(container, names):
    insert_start = time.time()
    for name in names:
        container.add(name)
    insert_duration = time.time() - insert_start
    print(f"Inserted {len(names)} names in {insert_duration:.2f} seconds.")
    return insert_duration

def lookups(container, names, count):
    probes = random.sample(names, min(count, len(names))) + [fake.name() for _ in range(count)]

    lookup_start = time.time()
    found = sum(1 for name in probes if name in container)
    lookup_duration = time.time() - lookup_start
    print(f"Executed {len(probes)} lookups ({found} hits) in {lookup_duration:.2f} seconds.")
    return lookup_duration

def ranges(container, count):
    bounds = [tuple(sorted((fake.name(), fake.name()))) for _ in range(count)]

    range_start = time.time()
    for low, high in bounds:
        if isinstance(container, OrderedSet):
            select(container, operators.between_op, (low, high))
        else:
            list(container.irange(low, high))
    range_duration = time.time() - range_start
    print(f"Executed {count} range queries in {range_duration:.2f} seconds.")
    return range_duration

def run_benchmark(container_type="tree", count=2_000, order="random"):
    print(f"Running benchmark: type={container_type}, count={count}, order={order}")

    container = make_container(container_type)
    names = generate_names(count, order)

    elapsed = inserts(container, names)
    elapsed += lookups(container, names, 500)
    elapsed += ranges(container, 100)

    if isinstance(container, OrderedSet):
        print(f"Tree depth: {container.depth()}")

    print(f"Total runtime for {container_type}: {elapsed:.2f} seconds.")



if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--type", choices=["tree", "sortedset"], required=True)
    parser.add_argument("--count", type=int, default=2_000)
    parser.add_argument("--order", choices=["random", "sorted"], default="random",
                        help="sorted input degenerates the tree into a chain")
    args = parser.parse_args()
    run_benchmark(args.type, args.count, args.order)
