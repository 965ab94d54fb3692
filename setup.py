from setuptools import setup,find_packages
import os
import re

def read(f):
    return open(f, 'r', encoding='utf-8').read()

def get_version(package):
    """
    Return package version as listed in `__version__` in `init.py`.
    """
    init_py = open(os.path.join(package, '__init__.py')).read()
    return re.search("__version__ = ['\"]([^'\"]+)['\"]", init_py).group(1)


version = get_version('todolist')

setup(
	name="todolist",
	version=version,
	url='',
	license='BSD',
	description='In-memory todo list web application.',
	long_description=read('README.md'),
	long_description_content_type='text/markdown',
	packages=find_packages(exclude=['tests*']),
	package_data={
		'todolist.web': ['templates/*.html', 'static/*'],
	},
	install_requires=["python-dateutil>=2.8.1", "flask>=2.2"],
    extras_require={
        "test": ["pytest>=7.0"],
    },
	entry_points={
		'console_scripts': ['todolist=todolist.__main__:main'],
	},
	python_requires=">=3.8",
	classifiers=[
        'Environment :: Web Environment',
        'Framework :: Flask',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
	]
)
