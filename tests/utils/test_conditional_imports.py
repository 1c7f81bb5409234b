import importlib
import subprocess
import sys

import pytest

import geosimplify  # noqa: F401
from geosimplify.utils.conditional_imports import ConditionalPackageInterceptor


@pytest.fixture
def fake_package():
    name = 'geosimplify_fake_optional_pkg'
    ConditionalPackageInterceptor.permit_packages({name: 'geosimplify[fake]'})
    yield name
    ConditionalPackageInterceptor.PERMITTED_PACKAGES.pop(name)
    ConditionalPackageInterceptor.permit_auto_download(False)


def test_interceptor_registered():
    assert ConditionalPackageInterceptor in sys.meta_path
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['geographiclib'] == 'geosimplify[karney]'


def test_permit_packages():
    ConditionalPackageInterceptor.permit_packages(['geosimplify_fake_list_pkg'])
    assert ConditionalPackageInterceptor.PERMITTED_PACKAGES['geosimplify_fake_list_pkg'] == \
        'geosimplify_fake_list_pkg'
    ConditionalPackageInterceptor.PERMITTED_PACKAGES.pop('geosimplify_fake_list_pkg')

    with pytest.raises(TypeError):
        ConditionalPackageInterceptor.permit_packages('geosimplify_fake_list_pkg')


def test_unregistered_package_ignored():
    assert ConditionalPackageInterceptor.find_spec('geosimplify_not_registered', None) is None

    with pytest.raises(ModuleNotFoundError):
        importlib.import_module('geosimplify_not_registered')


def test_missing_package_message(fake_package):
    with pytest.raises(ModuleNotFoundError, match=r'pip install geosimplify\[fake\]'):
        importlib.import_module(fake_package)


def test_missing_package_auto_download(fake_package, monkeypatch):
    calls = []

    def fail(cmd, **_):
        calls.append(cmd)
        raise subprocess.CalledProcessError(1, cmd)

    monkeypatch.setattr(subprocess, 'run', fail)
    ConditionalPackageInterceptor.permit_auto_download(True)
    assert ConditionalPackageInterceptor.find_spec(fake_package, None) is None
    assert calls == [[sys.executable, '-m', 'pip', 'install', 'geosimplify[fake]']]
