from __future__ import annotations

"""
Quantum engine: builds a circuit, puts qubits in superposition,
measures them in alternating bases, and exposes the outcomes as a
`SecureRandomSource` for the strong generator.
"""
import logging

from qiskit import QuantumCircuit, transpile
from qiskit_aer import AerSimulator

from .config import EngineConfig, DEFAULT_CONFIG
from .sources import SecureRandomSource, amplify_entropy, bits_to_bytes

logger = logging.getLogger(__name__)


class QuantumEngine:
    """
    Encapsulates all quantum-circuit-related logic.
    """

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.backend = AerSimulator()

        backend_cfg = self.backend.configuration()
        max_qubits = getattr(backend_cfg, "num_qubits", None)

        if max_qubits is not None and self.config.num_qubits > max_qubits:
            raise ValueError(
                f"Configured num_qubits={self.config.num_qubits} exceeds "
                f"backend limit ({max_qubits}). "
                "Lower num_qubits in EngineConfig."
            )

    def _build_circuit(self) -> QuantumCircuit:
        """
        Prepare N qubits, put them in superposition, then measure
        in alternating bases (Z, X, Z, X, ...).
        """
        n = self.config.num_qubits
        qc = QuantumCircuit(n, n)

        for i in range(n):
            qc.h(i)

        for i in range(n):
            if i % 2 == 1:
                # X-basis: extra H before measuring
                qc.h(i)
            qc.measure(i, i)

        return qc

    def get_raw_bits(self) -> list[int]:
        """
        Run the circuit once (single shot) and return the measured bits,
        index 0 being the first qubit.
        """
        tqc = transpile(self._build_circuit(), self.backend)
        result = self.backend.run(tqc, shots=1).result()
        bitstring = next(iter(result.get_counts().keys()))

        # Qiskit orders bits as [q_(n-1) ... q_0].
        return [int(b) for b in bitstring[::-1]]


class QuantumRandomSource(SecureRandomSource):
    """
    32-bit words from XOR-combined quantum streams, mixed with SHA-256.

    Each refill samples `quantum_streams` independent runs, combines them
    and hashes the result `entropy_rounds` times (at least once, so every
    refill yields a full 32-byte digest).
    """

    is_secure = True
    name = "quantum"

    def __init__(self, config: EngineConfig | None = None) -> None:
        self.config = config or DEFAULT_CONFIG
        self.engine = QuantumEngine(self.config)
        self._buffer = b""

    def _refill(self) -> None:
        combined: list[int] | None = None
        for _ in range(max(1, self.config.quantum_streams)):
            bits = self.engine.get_raw_bits()
            if combined is None:
                combined = bits
            else:
                combined = [b ^ c for b, c in zip(bits, combined)]

        assert combined is not None
        digest = amplify_entropy(
            bits_to_bytes(combined), max(1, self.config.entropy_rounds)
        )
        logger.debug("quantum source refilled with %d bytes", len(digest))
        self._buffer += digest

    def next_uint32(self) -> int:
        while len(self._buffer) < 4:
            self._refill()
        word, self._buffer = self._buffer[:4], self._buffer[4:]
        return int.from_bytes(word, "big")
