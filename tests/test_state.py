from turtledraw.errors import CommandError
from turtledraw.state import COLORS, INITIAL_STATE, Command, Pose, TurtleState, flatten, command_pairs, process
from dataclasses import replace
import pickle, random, pytest

def random_commands(rnd, n=60):
    tokens = []
    for _ in range(n):
        cmd = rnd.choice(['fwd', 'left', 'right', 'pen', 'save', 'restore', 'origin', 'color-index', 'jump'])
        tokens.append(cmd)
        if   cmd in ('fwd', 'jump'):     tokens.append(rnd.uniform(-100, 100))
        elif cmd in ('left', 'right'):   tokens.append(rnd.choice([rnd.uniform(-720, 720), 360, -360, 1e-20, -1e-20]))
        elif cmd == 'pen':               tokens.append(rnd.choice(['up', 'down']))
        elif cmd == 'color-index':       tokens.append(rnd.randint(-2, 12))
    return tokens

def test_initial_state():
    assert INITIAL_STATE.coords == (0, 0)
    assert INITIAL_STATE.heading == 90
    assert INITIAL_STATE.color == COLORS[0]
    assert INITIAL_STATE.stack == ()
    assert not INITIAL_STATE.move and not INITIAL_STATE.restore_point
    assert process([]) == [INITIAL_STATE]

def test_forward_and_turn():
    states = process(['color', 'red', 'fwd', 50, 'left', 90, 'fwd', 50])
    assert len(states) == 5
    assert states[1].color == 'red'
    assert states[2].coords == (0.0, 50.0)
    assert states[3].heading == 180
    assert states[4].coords == (-50.0, 50.0)
    assert all(s.color == 'red' for s in states)

def test_heading_is_normalized():
    assert process(['right', 90])[-1].heading == 0
    assert process(['right', 180])[-1].heading == 270
    assert process(['left', 630])[-1].heading == 0
    assert process(['right', 90, 'right', 1e-20])[-1].heading == 0
    for seed in range(20):
        for state in process(random_commands(random.Random(seed))):
            assert 0 <= state.heading < 360

def test_left_right_cancel():
    for angle in (0, 45, 90, 137.25, 360, 725):
        start = process(['left', 33])[-1].heading
        assert process(['left', 33, 'left', angle, 'right', angle])[-1].heading == pytest.approx(start)

def test_colors():
    states = process(['color', '#123456', 'fill', 'blue', 'color-index', 2, 'color-index', 10, 'color-index', 'x'])
    assert [s.color for s in states] == ['red', '#123456', '#123456', 'blue', 'blue', 'blue']
    assert [s.fill for s in states] == [None, None, 'blue', 'blue', 'blue', 'blue']
    assert process(['color-index', 9])[-1].color == '#68FF33'
    assert process(['color-index', True])[-1].color == 'red'

def test_save_restore():
    states = process(['left', 30, 'fwd', 3, 'save', 'fwd', 10, 'right', 45, 'restore'])
    before, restored = states[3], states[-1]
    assert restored.coords == before.coords
    assert restored.heading == before.heading
    assert restored.stack == ()
    assert restored.restore_point
    assert states[3].stack == (Pose(before.coords, before.heading),)

    states = process(['save', 'fwd', 10, 'restore'])
    assert states[-1].coords == states[0].coords
    assert states[-1].restore_point

def test_stack_depth():
    states = process(['save', 'save', 'fwd', 1, 'save', 'restore', 'restore'])
    assert [len(s.stack) for s in states] == [0, 1, 2, 2, 3, 2, 1]

def test_restore_empty_stack():
    states = process(['origin', 'restore'])
    assert states[1].restore_point
    assert states[2] == replace(states[1], restore_point=False)
    assert process(['fwd', 5, 'restore'])[-1] == process(['fwd', 5])[-1]

def test_restore_point_is_not_sticky():
    states = process(['save', 'restore', 'fwd', 1, 'origin', 'left', 10])
    assert [s.restore_point for s in states] == [False, False, True, False, True, False]

def test_origin():
    for seed in range(5):
        tokens = random_commands(random.Random(seed)) + ['save', 'origin']
        last = process(tokens)[-1]
        assert last.coords == (0, 0)
        assert last.heading == 90
        assert last.stack == ()
        assert last.restore_point

def test_pen_is_sticky():
    states = process(['pen', 'up', 'fwd', 10, 'left', 90, 'fwd', 10, 'pen', 'down', 'fwd', 10])
    assert [s.move for s in states] == [False, True, True, True, True, False, False]
    assert states[2].coords == (0.0, 10.0)
    assert states[-1].coords == (-20.0, 10.0)

def test_rounding():
    for seed in range(10):
        for state in process(random_commands(random.Random(seed))):
            x, y = state.coords
            assert round(x, 5) == x and round(y, 5) == y
    assert process(['left', 30, 'fwd', 1])[-1].coords == (-0.5, 0.86603)

def test_tokens():
    assert list(flatten(['fwd', [10, ['left', (90,)]], 'color', 'red'])) == ['fwd', 10, 'left', 90, 'color', 'red']
    assert list(command_pairs(['save', 'fwd', 10, 'jump', 3, 'restore'])) == [
        (Command.SAVE, None), (Command.FWD, 10), (Command.RESTORE, None)]
    nested = process(['fwd', [10, ['left', 90]], ('fwd', 10)])
    assert nested == process(['fwd', 10, 'left', 90, 'fwd', 10])
    assert process([Command.FWD, 10]) == process(['fwd', 10])

def test_unknown_commands_are_ignored():
    assert process(['jump', 5, 'fwd', 10, 'spin']) == process(['fwd', 10])
    assert Command.lookup('FWD') is None
    assert Command.lookup(42) is None

def test_invalid_arguments():
    for tokens in (['fwd', 'ten'], ['fwd'], ['left', 'fwd', 10], ['right', True], ['fwd', float('nan')]):
        with pytest.raises(CommandError): process(tokens)
    with pytest.raises(TypeError): process(['fwd', 'ten'])

def test_command_error_pickles():
    err = pickle.loads(pickle.dumps(CommandError('fwd', 'ten')))
    assert (err.command, err.value) == ('fwd', 'ten')
    assert str(err) == "fwd expects a number, got 'ten'"
    assert isinstance(err, TypeError)

def test_states_are_immutable():
    state = TurtleState()
    with pytest.raises(AttributeError): state.heading = 0
