"""Reporte por consola de los tres motores sobre los datos de PATHS."""
from src.core.config import PATHS, COLLAB_CONFIG
from src.core.consistency import ConsistencyChecker
from src.core.contact_graph import ContactGraph
from src.core.exposure import ExposurePropagator
from src.core.collaboration import CollaborationGraph
from src.data.loader import DataLoader
from src.analysis import GraphStatistics, PropagationAnalyzer, DistanceAnalyzer


class GraphReportApp:
    """Carga los conjuntos de datos y reporta cada motor (Patrón Fachada)."""

    def __init__(self, paths=PATHS):
        self.paths = paths
        self.loader = DataLoader(paths.hechos, paths.contactos, paths.articulos)

    def report_consistency(self):
        if not self.paths.hechos.exists():
            return
        hechos = self.loader.load_statements()
        ciclo = ConsistencyChecker.find_cycle(hechos)

        print(f"\nHechos: {len(hechos)} -> {'consistentes' if ciclo is None else 'INCONSISTENTES'}")
        if ciclo:
            print("  Ciclo: " + " -> ".join(f"{e.name}:{e.state.value}" for e in ciclo))

    def report_tracing(self):
        if not self.paths.contactos.exists():
            return
        contactos = ContactGraph(self.loader.load_contacts())
        stats = GraphStatistics.get_statistics(contactos.graph)

        print(f"\n{'Red':<14} {'Nodos':>6} {'Aristas':>8} {'Densidad':>10} {'Comp.':>6}")
        print("=" * 50)
        print(f"{'Contactos':<14} {stats['nodos']:>6} {stats['aristas']:>8} "
              f"{stats['densidad']:>10.4f} {stats['componentes']:>6}")

        if len(contactos) == 0:
            return

        # Rastreo desde la persona con más contactos, al inicio del registro
        fuente = max(sorted(contactos.people), key=lambda p: len(contactos.direct_contacts(p)))
        inicio = min(min(contactos.contact_times(fuente, p)) for p in contactos.direct_contacts(fuente))

        arbol = ExposurePropagator(contactos).trace_tree(fuente, inicio)
        analyzer = PropagationAnalyzer()
        analyzer.print_results(analyzer.analyze(arbol))

    def report_collaboration(self):
        if not self.paths.articulos.exists():
            return
        colaboracion = CollaborationGraph(self.loader.load_papers(), COLLAB_CONFIG.reference_author)

        analyzer = DistanceAnalyzer()
        analyzer.print_results(analyzer.analyze(colaboracion))
        print(f"Conectado a todos: {colaboracion.is_reference_connected_to_all()}")

    def run(self):
        self.report_consistency()
        self.report_tracing()
        self.report_collaboration()


def main():
    """Punto de entrada."""
    GraphReportApp().run()


if __name__ == '__main__':
    main()
