from glob import glob
from setuptools import setup


setup(
    name='revpol',
    use_scm_version={
        # For trees not checked out from git, e.g., sdists and tarballs.
        'fallback_version': '0.1.0',
    },
    description='RPN calculator with registers',
    install_requires=[
        'regex',
        'prompt_toolkit',
    ],
    packages=['revpol'],
    package_dir={'': 'src'},
    include_package_data=True,
    zip_safe=False,
    classifiers=[
        "Programming Language :: Python :: 3",
    ],
    setup_requires=[
        'setuptools_scm',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-cov',
        ],
    },
    scripts=glob('bin/*'),
    license='ISC',
)
