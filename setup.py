from setuptools import setup, find_packages

setup(
    name='timer',
    version='0.0.1',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    python_requires='>=3.10',
    install_requires=[
        'colored==2.2.3',
        'halo==0.0.31',
        'plyer==2.1.0',
        'python-dotenv==1.0.1',
    ],
    extras_require={
        'test': [
            'pytest>=7.4',
        ],
    },
    entry_points='''
        [console_scripts]
        timer=timer.__main__:main
    ''',
    license='MIT',
    keywords='timer countdown sound notification',
    description='Set a timer, play a sound and show a notification when it expires',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
