from formal_context import FormalContext


class DefaultContextInitializer:
    SEED_SIZE = 4
    SEED_RELATION = frozenset(
        {(0, 0), (1, 0), (2, 1), (1, 2), (2, 2), (3, 0), (3, 3)}
    )

    def create(self, variant: str = "seeded") -> FormalContext:
        if variant == "empty":
            return self.empty()
        return self.seeded()

    def seeded(self) -> FormalContext:
        ctx = FormalContext()
        for _ in range(self.SEED_SIZE):
            ctx = ctx.add_row().add_column()
        return FormalContext(ctx.objects, ctx.attributes, self.SEED_RELATION)

    def empty(self) -> FormalContext:
        return FormalContext()
