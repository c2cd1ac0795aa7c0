from setuptools import setup, find_namespace_packages

setup (name = 'cs.id3recode',
       version = '20261019',
       description = 'Recode Shift_JIS ID3v2.3 title/album/artist frames as UTF-8.',
       python_requires = '>=3.8',
       package_dir = {'': 'lib/python'},
       packages = find_namespace_packages(where = 'lib/python', include = ['cs']),
       install_requires = [
           'cs.binary>=20250501',
           'cs.buffer>=20250428,<20260914',
           'cs.cmdutils>=20250531',
           'cs.fileutils',
           'cs.logutils',
           'cs.pfx',
       ],
       extras_require = {
           'test': ['pytest'],
       },
       entry_points = {
           'console_scripts': ['id3recode = cs.id3recode:main'],
       })
