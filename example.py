import logging

import numpy as np

import cadkinematic
from cadkinematic.export import LinkSpec, JointSpec, build_chain


def print_sweep(chain, steps=5):
    """
    Print the pose of every link while every joint sweeps
    between its limits.

    Parameters
    -----------
    chain : KinematicChain
      Chain to evaluate
    steps : int
      Number of samples along the sweep
    """
    forward = chain.forward_kinematics_lambda()
    limits = np.clip(chain.limits, -np.pi, np.pi)
    for ratio in np.linspace(0.0, 1.0, steps):
        position = limits[:, 0] + ratio * (limits[:, 1] - limits[:, 0])
        print('joints:', np.round(position, 3))
        for name, F in forward.items():
            matrix = np.asarray(F(*position), dtype=np.float64)
            print(f'  {name}: {np.round(matrix[:3, 3], 4)}')


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

    catalog = cadkinematic.exchange.load_catalog('models/arm.xml')
    resolver = cadkinematic.GeometryResolver(
        catalog, scale=cadkinematic.MM_TO_M)

    c = catalog.components
    links = [LinkSpec('base', c['base'], 'BASE_REF'),
             LinkSpec('shoulder', c['shoulder'], 'SHOULDER_REF'),
             LinkSpec('upperarm', c['upperarm'], 'UPPERARM_REF')]
    joints = [JointSpec('yaw', 'base', 'shoulder', 'SHOULDER_AXIS',
                        limits=[-np.pi, np.pi]),
              JointSpec('elbow', 'shoulder', 'upperarm', 'ELBOW_AXIS',
                        limits=[-np.pi / 2, np.pi / 2])]

    chain, report = build_chain(resolver, links, joints)
    if not report.complete:
        print('skipped links:', report.skipped_links)
        print('skipped joints:', report.skipped_joints)

    print_sweep(chain)
