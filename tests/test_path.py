import pytest

from pywhich.env import Environment
from pywhich.path import iter_path_elements, is_absolute_program, split_program, \
    expand_tilde, normalize, is_under, relative_display


CWD = '/work/dir/'


def test_path_elements():
    assert list(iter_path_elements('/bin:/usr/bin')) == ['/bin', '/usr/bin']
    assert list(iter_path_elements('/bin')) == ['/bin']

def test_path_elements_empty_is_dot():
    assert list(iter_path_elements('/bin::/usr/bin')) == ['/bin', '.', '/usr/bin']
    assert list(iter_path_elements(':/bin')) == ['.', '/bin']
    assert list(iter_path_elements('/bin:')) == ['/bin', '.']

def test_path_elements_verbatim():
    assert list(iter_path_elements('~/bin:./tools')) == ['~/bin', './tools']

def test_empty_path_list():
    assert list(iter_path_elements('')) == []
    assert list(iter_path_elements(None)) == []


def test_is_absolute_program():
    assert is_absolute_program('./foo')
    assert is_absolute_program('/usr/bin/ls')
    assert is_absolute_program('bin/tool')
    assert is_absolute_program('~/bin/tool')
    assert is_absolute_program('.hidden')
    assert not is_absolute_program('ls')
    assert not is_absolute_program('foo~')

@pytest.mark.parametrize('name,expected', [
    ('./foo', ('.', 'foo')),
    ('../foo', ('..', 'foo')),
    ('bin/tool', ('./bin', 'tool')),
    ('/usr/bin/ls', ('/usr/bin', 'ls')),
    ('/ls', ('/', 'ls')),
    ('~/bin/tool', ('~/bin', 'tool')),
    ('.hidden', ('.', '.hidden')),
])
def test_split_program(name, expected):
    assert split_program(name) == expected


def test_expand_tilde():
    env = Environment({'HOME': '/home/alice/'})
    assert expand_tilde('~', env) == '/home/alice'
    assert expand_tilde('~/bin', env) == '/home/alice/bin'
    assert expand_tilde('/usr/bin', env) == '/usr/bin'

def test_expand_tilde_user():
    import pwd
    home = pwd.getpwnam('root').pw_dir.rstrip('/')

    env = Environment({'HOME': '/home/alice'})
    assert expand_tilde('~root/bin', env) == home + '/bin'

def test_expand_tilde_unknown_user():
    env = Environment({'HOME': '/home/alice'})
    assert expand_tilde('~no-such-user-for-sure/bin', env) is None

def test_expand_tilde_root_home():
    env = Environment({'HOME': '/'})
    assert expand_tilde('~', env) == '/'
    assert expand_tilde('~/bin', env) == '/bin'


def test_normalize():
    assert normalize('/a/b/../c') == '/a/c'
    assert normalize('/a/./b') == '/a/b'
    assert normalize('/a//b') == '/a/b'
    assert normalize('/a/b/c/../../d') == '/a/d'
    assert normalize('/') == '/'

def test_normalize_relative():
    assert normalize('./x', CWD) == CWD + 'x'
    assert normalize('x', CWD) == CWD + 'x'
    assert normalize('../x', CWD) == '/work/x'

def test_normalize_trailing():
    assert normalize('/a/b/') == '/a/b/'
    assert normalize('/a/b/.') == '/a/b/'
    assert normalize('/a/b/..') == '/a/'
    assert normalize('/a/..') == '/'

def test_normalize_above_root():
    assert normalize('/..') == '/..'
    assert normalize('/a/../../b') == '/a/../../b'
    assert normalize('../../../x', CWD) == '../../../x'

@pytest.mark.parametrize('path', [
    '/a/b/../c', '/a/./b', './x', '../../y/.', '/a/b/', '//a//b//..',
    '/..', '../../../../x', 'tools/../bin/tool', '.',
])
def test_normalize_idempotent(path):
    once = normalize(path, CWD)
    assert normalize(once, CWD) == once


def test_is_under():
    assert is_under('/home/alice/bin/tool', '/home/alice/')
    assert not is_under('/home/alicia/bin/tool', '/home/alice/')
    assert not is_under('/home/alice/bin/tool', None)
    assert not is_under('/home/alice/bin/tool', '')

def test_relative_display():
    assert relative_display('/home/alice/bin/tool', '/home/alice/', '~/') == '~/bin/tool'
    assert relative_display('/work/dir/tool', '/work/dir/', './') == './tool'
    assert relative_display('/usr/bin/tool', '/home/alice/', '~/') == '/usr/bin/tool'
