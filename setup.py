from setuptools import find_packages, setup


setup(
    name='django-shorttoken',
    version='0.1.0',
    description='Short, reversible base62 tokens stored as integers, for Django.',
    #long_description=open('README').read(),

    # Get more strings from https://pypi.org/classifiers/
    classifiers=[
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Intended Audience :: Developers",
        "Framework :: Django",
        "Development Status :: 3 - Alpha",
        "Environment :: Web Environment",
        "Operating System :: OS Independent",
        "License :: OSI Approved :: BSD License"
    ],
    keywords='django base62 token short url id slug',
    license='BSD',
    packages=find_packages(exclude=['ez_setup']),
    include_package_data=True,
    zip_safe=False,
    python_requires='>=3.8',
    install_requires=[
        'Django>=3.1',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
