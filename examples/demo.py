"""Small demonstration: grouping build targets that depend on each other."""

from __future__ import annotations

from orderedunionfind import StandardUnionFind, component_labels


def make_dependencies() -> list[tuple[str, str]]:
    return [
        ("//app:main", "//lib:core"),
        ("//lib:core", "//lib:util"),
        ("//tools:gen", "//tools:templates"),
        ("//lib:util", "//third_party:numpy"),
    ]


def main() -> None:
    targets = ["//app:main", "//tools:gen", "//docs:site"]
    uf = StandardUnionFind(targets)
    for target, dependency in make_dependencies():
        uf.union(target, dependency)

    print("Target groups:")
    for representative, members in uf.groups().items():
        print(f"  {representative}: {', '.join(members)}")

    labels = component_labels(6, [0, 1, 4], [1, 2, 5])
    print("Component labels:")
    print(labels)


if __name__ == "__main__":
    main()
