from setuptools import setup, find_packages
import codecs
import os

here = os.path.abspath(os.path.dirname(__file__))

long_description = ""
readme = os.path.join(here, "README.md")
if os.path.exists(readme):
    with codecs.open(readme, encoding="utf-8") as fh:
        long_description = "\n" + fh.read()

VERSION = '0.1.0'
DESCRIPTION = 'OBJ polygon soup to GPU vertex/index buffers'
LONG_DESCRIPTION = 'Turns parsed OBJ polygons into deduplicated vertex buffers and 16-bit index buffers for triangle or wireframe drawing.'

# Setting up
setup(
    name="objbuffers",
    version=VERSION,
    author="rootjatin (Jatin Sharma)",
    author_email="<jatin100198@gmail.com>",
    description=DESCRIPTION,
    long_description_content_type="text/markdown",
    long_description=long_description or LONG_DESCRIPTION,
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=['numpy'],
    extras_require={'test': ['pytest']},
    python_requires=">=3.8",
    keywords=['python', 'three dimensional', 'render', 'obj', 'mesh', 'index buffer', 'wireframe'],
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Operating System :: Unix",
        "Operating System :: MacOS :: MacOS X",
        "Operating System :: Microsoft :: Windows",
    ]
)
