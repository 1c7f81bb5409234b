import re

from geosimplify.utils.mixins import LoggingMixin


class Foo(LoggingMixin):
    pass


class Bar(LoggingMixin):

    def __init__(self):
        super().__init__('sub')


def test_logger_name():
    assert Foo().logger.name == 'tests.utils.test_mixins.Foo'
    assert Bar().logger.name == 'tests.utils.test_mixins.Bar.sub'


def test_warn_once(caplog):
    foo = Foo()
    foo.warn_once('test mixin')
    assert 'test mixin' in caplog.text

    bar = Bar()
    bar.warn_once('test mixin')
    assert len(re.findall('test mixin', caplog.text)) == 1
