import random
import irctypes


def with_channel(names=None, channel='#lobby', features=None):
    """ Run the test with a channel (filled from a NAMES list, if given) and the server support it was built with. """
    def inner(f):
        def run():
            support = irctypes.ServerSupport()
            if features:
                support.update(features)

            chan = irctypes.Channel(channel)
            if names:
                chan.update_names(irctypes.NameReply.parse(['TestcaseRunner', '=', channel, names]), support=support)

            return f(channel=chan, support=support)

        run.__name__ = f.__name__
        return run
    return inner


def random_nickname(rng):
    """ A random nickname that is always valid: letters and specials, with a digit every third character. """
    name = chr(rng.randrange(65, 125))
    for i in range(1, rng.randrange(1, 24)):
        if i % 3 == 0:
            name += chr(rng.randrange(48, 58))
        else:
            name += chr(rng.randrange(65, 125))
    return name


def random_invalid_nickname(rng):
    """ A random string that is never a valid nickname. """
    name = ''.join(chr(rng.randrange(32, 255)) for _ in range(rng.randrange(1, 24)))
    return name + 'µ'


def toggle_case(value):
    return ''.join(c.lower() if c.isupper() else c.upper() for c in value)


def seeded_random(seed=1459):
    return random.Random(seed)
