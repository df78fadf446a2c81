# webapp/plugins/support.py


def some_support() -> str:
    return "hugs"


def register(app, ctx, options):
    ctx.decorate("some_support", some_support)
