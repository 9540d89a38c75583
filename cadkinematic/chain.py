"""
chain.py
--------------

Kinematic chains assembled from resolved links and joints.

Uses sympy to produce numpy-lambdas for forward kinematics, which once computed
are quite fast (for Python anyway) to execute.
"""
import sympy as sp
import numpy as np
import networkx as nx

from .reporting import log


class KinematicChain(object):
    """
    A mechanism which consists of resolved frames (`Link` objects)
    connected by variable transforms (`Joint` objects).
    """

    def __init__(self,
                 joints,
                 links,
                 base_link='base'):
        """
        Create a kinematic chain.

        Parameters
        --------------
        joints : dict
          Joint name to `Joint` objects
        links : dict
          Link name to `Link` objects
        base_link : str
          Name of base link
        """
        self.joints = joints
        self.links = links
        self.base_link = base_link

    @property
    def movable(self):
        """
        Joints which have a joint variable, in insertion order.
        """
        return [j for j in self.joints.values() if j.parameter is not None]

    @property
    def parameters(self):
        """
        What are the variables that define the state of the chain.

        Returns
        ---------
        parameters : (n,) sympy.Symbol
          Ordered parameters
        """
        return [j.parameter for j in self.movable]

    @property
    def limits(self):
        if len(self.movable) == 0:
            return np.zeros((0, 2))
        return np.sort([j.limits for j in self.movable], axis=1)

    def graph(self):
        """
        Get a directed graph where joints are edges between links.

        Returns
        ----------
        graph : networkx.DiGraph
          Graph containing connectivity information
        """
        graph = nx.DiGraph()
        graph.add_nodes_from(self.links.keys())
        for name, joint in self.joints.items():
            graph.add_edge(*joint.connects, joint=name)
        return graph

    def paths(self):
        """
        Find the route from the base link to every link.

        Returns
        ---------
        joint_paths : dict
          Keys are link names, values are a list of joint names
        """
        base = self.base_link
        graph = self.graph()
        joint_paths = {}
        for name in self.links.keys():
            try:
                path = nx.shortest_path(graph, base, name)
            except (nx.NetworkXNoPath, nx.NodeNotFound):
                log.warning(f'no path from {base} to {name}')
                continue
            joint_paths[name] = [graph.get_edge_data(a, b)['joint']
                                 for a, b in zip(path[:-1], path[1:])]
        return joint_paths

    def forward_kinematics(self):
        """
        Get the symbolic sympy forward kinematics.

        Returns
        -----------
        symbolic : dict
          Keyed by link name to a sympy matrix
          relative to the base link frame
        """
        def product(L):
            if len(L) == 0:
                return sp.eye(4)
            cum = L[0]
            for i in L[1:]:
                cum = cum * i
            return cum

        # routes from base link
        paths = self.paths()
        # symbolic matrices
        matrices = {name: j.matrix for name, j in self.joints.items()}

        combined = {k: product([matrices[i] for i in path])
                    for k, path in paths.items()}

        return combined

    def forward_kinematics_lambda(self):
        """
        Get a numpy-lambda for evaluating forward kinematics relatively
        quickly.

        Returns
        -----------
        lambdas : dict
          Link name to function which takes float values
          corresponding to self.parameters.
        """
        combined = self.forward_kinematics()
        return {k: sp.lambdify(self.parameters, c, modules='numpy')
                for k, c in combined.items()}
