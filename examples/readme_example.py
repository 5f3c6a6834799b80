from zombiegame import (
    Actor,
    AttackDescriptor,
    StreamSink,
    Weapon,
    bind_alias,
    deep_copy,
    shallow_copy,
    sharing_report,
)


def main() -> None:
    narrator = StreamSink()
    bob = Actor("Bob", 100, Weapon("Bite", 15, 1), narrator=narrator)
    bob.add_secondary_attack(AttackDescriptor("Arm", 20, 5))
    bob.add_secondary_attack(AttackDescriptor("Rock", 10, 3))

    for label, make in (("alias", bind_alias), ("shallow", shallow_copy), ("deep", deep_copy)):
        other = make(bob)
        report = sharing_report(bob, other)
        print(
            f"{label:>7}: same actor={report.same_actor}, same weapon={report.same_weapon}, "
            f"same attacks={report.same_attacks}, independent={report.independent}"
        )

    karen = deep_copy(bob)
    karen.name = "Karen"
    karen.weapon.power = 30
    bob.attack(karen)
    karen.attack(bob)


if __name__ == "__main__":
    main()
