"""Actions referenced by the test configuration files."""


def reset(context, emit):
    context.count = 0


def count(context, emit, token, from_state, to_state):
    context.count += 1


def total(context, emit):
    emit(context.count)
    return context.count


def echo(context, emit, token, from_state, to_state):
    emit(token)


NOT_CALLABLE = 'not callable'
