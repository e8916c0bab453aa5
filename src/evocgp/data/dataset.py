"""
CGP Dataset Module

This module implements the Dataset class, the input/output samples a
chromosome is trained against.

File format (text, comma separated):
    - first line: num_inputs,num_outputs,num_samples
    - then one line per sample: the input values followed by the output values

Classes:
    Dataset: Paired input and output samples stored as numpy arrays
"""

import numpy as np
from typing import Sequence

class Dataset:
    """
    A set of training samples.

    Public Properties:
        inputs:      Input values,  shape (num_samples, num_inputs)
        outputs:     Output values, shape (num_samples, num_outputs)
        num_inputs:  Number of input values per sample
        num_outputs: Number of output values per sample
        num_samples: Number of samples

    Public Methods:
        sample_inputs(i):  Input values of sample i
        sample_outputs(i): Output values of sample i
        save(path):        Write the dataset to a file

    Class Methods:
        from_file(path):    Read a dataset file
        from_arrays(...):   Build a dataset from flat or 2D sequences
    """

    def __init__(self, inputs, outputs):
        """
        Parameters:
            inputs:  2D array-like, one row of input values per sample
            outputs: 2D array-like, one row of output values per sample

        Raises:
            ValueError: If the arrays are not 2D or hold different numbers of samples
        """
        inputs  = np.array(inputs,  dtype=np.float64)
        outputs = np.array(outputs, dtype=np.float64)

        if inputs.ndim != 2 or outputs.ndim != 2:
            raise ValueError("inputs and outputs must be 2D arrays")
        if inputs.shape[0] != outputs.shape[0]:
            raise ValueError(f"inputs hold {inputs.shape[0]} samples but outputs hold {outputs.shape[0]}")

        self._inputs  = inputs
        self._outputs = outputs

    @classmethod
    def from_file(cls, path: str) -> 'Dataset':
        """
        Read a dataset file (see the module docstring for the format).

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError:        If the contents disagree with the header
        """
        with open(path, "r", encoding="utf-8") as f:
            header = f.readline()
            try:
                num_inputs, num_outputs, num_samples = (int(field) for field in header.split(','))
            except ValueError:
                raise ValueError(f"invalid dataset header in '{path}': {header.strip()!r}") from None

            data = np.loadtxt(f, delimiter=',', dtype=np.float64, ndmin=2)

        if num_samples == 0:
            data = data.reshape(0, num_inputs + num_outputs)

        if data.shape[0] != num_samples:
            raise ValueError(f"'{path}' declares {num_samples} samples but holds {data.shape[0]}")
        if data.shape[1] != num_inputs + num_outputs:
            raise ValueError(f"'{path}' rows hold {data.shape[1]} values, expected {num_inputs + num_outputs}")

        return cls(data[:, :num_inputs], data[:, num_inputs:])

    @classmethod
    def from_arrays(cls,
                    num_inputs : int,
                    num_outputs: int,
                    num_samples: int,
                    inputs     : Sequence,
                    outputs    : Sequence) -> 'Dataset':
        """
        Build a dataset from sample values.

        'inputs' and 'outputs' may either be 2D, or flat with the samples stored
        one after another (row-major).
        """
        inputs  = np.asarray(inputs,  dtype=np.float64).reshape(num_samples, num_inputs)
        outputs = np.asarray(outputs, dtype=np.float64).reshape(num_samples, num_outputs)
        return cls(inputs, outputs)

    def save(self, path: str) -> None:
        """Write the dataset in the format read by from_file()."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(f"{self.num_inputs},{self.num_outputs},{self.num_samples}\n")
            for row in np.hstack([self._inputs, self._outputs]):
                f.write(','.join(repr(float(value)) for value in row) + '\n')

    @property
    def inputs(self) -> np.ndarray:
        return self._inputs

    @property
    def outputs(self) -> np.ndarray:
        return self._outputs

    @property
    def num_inputs(self) -> int:
        return self._inputs.shape[1]

    @property
    def num_outputs(self) -> int:
        return self._outputs.shape[1]

    @property
    def num_samples(self) -> int:
        return self._inputs.shape[0]

    def sample_inputs(self, i: int) -> np.ndarray:
        return self._inputs[i]

    def sample_outputs(self, i: int) -> np.ndarray:
        return self._outputs[i]

    def __len__(self) -> int:
        return self.num_samples

    def __getitem__(self, i: int) -> tuple[np.ndarray, np.ndarray]:
        return self._inputs[i], self._outputs[i]

    def __str__(self):
        lines = ["DATA SET",
                 f"Inputs: {self.num_inputs}, Outputs: {self.num_outputs}, Samples: {self.num_samples}"]
        for i in range(self.num_samples):
            line  = ' '.join(f"{value:f}" for value in self._inputs[i])
            line += " : "
            line += ' '.join(f"{value:f}" for value in self._outputs[i])
            lines.append(line)
        return '\n'.join(lines)

    def __repr__(self):
        return f"Dataset(num_inputs={self.num_inputs}, num_outputs={self.num_outputs}, num_samples={self.num_samples})"
