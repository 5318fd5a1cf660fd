from setuptools import setup
from Cython.Build import cythonize

setup(
    name="indexed-heap",
    version="0.1.0",
    description="Binary heap over externally stored elements with "
                "logarithmic priority updates by id",
    py_modules=["binary_tree", "indexed_heap", "shortest_path"],
    install_requires=["numpy"],
    ext_modules=cythonize(["binary_tree.py", "indexed_heap.py"],
                          compiler_directives={"language_level": 3}
    )
)
