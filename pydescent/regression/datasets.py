"""
Reference datasets for gradient descent regression.

Each row is the feature values followed by the target, the layout
LinearRegressionModel.add_data() expects.

profit (97 x 2):
    city population in 10,000s, food truck profit in $10,000s.
    alpha=0.01, max_iters=1500 gives theta = [5.8391, 4.6169] (4 d.p.).

housing (47 x 3):
    house size in square feet, number of bedrooms, price in dollars.
    alpha=0.1, max_iters=400 gives theta ~ [340412.6596, 110631.0467, -6649.4707].
"""

import numpy as np

profit = np.array([
    [6.1101, 17.592],
    [5.5277, 9.1302],
    [8.5186, 13.662],
    [7.0032, 11.854],
    [5.8598, 6.8233],
    [8.3829, 11.886],
    [7.4764, 4.3483],
    [8.5781, 12],
    [6.4862, 6.5987],
    [5.0546, 3.8166],
    [5.7107, 3.2522],
    [14.164, 15.505],
    [5.734, 3.1551],
    [8.4084, 7.2258],
    [5.6407, 0.71618],
    [5.3794, 3.5129],
    [6.3654, 5.3048],
    [5.1301, 0.56077],
    [6.4296, 3.6518],
    [7.0708, 5.3893],
    [6.1891, 3.1386],
    [20.27, 21.767],
    [5.4901, 4.263],
    [6.3261, 5.1875],
    [5.5649, 3.0825],
    [18.945, 22.638],
    [12.828, 13.501],
    [10.957, 7.0467],
    [13.176, 14.692],
    [22.203, 24.147],
    [5.2524, -1.22],
    [6.5894, 5.9966],
    [9.2482, 12.134],
    [5.8918, 1.8495],
    [8.2111, 6.5426],
    [7.9334, 4.5623],
    [8.0959, 4.1164],
    [5.6063, 3.3928],
    [12.836, 10.117],
    [6.3534, 5.4974],
    [5.4069, 0.55657],
    [6.8825, 3.9115],
    [11.708, 5.3854],
    [5.7737, 2.4406],
    [7.8247, 6.7318],
    [7.0931, 1.0463],
    [5.0702, 5.1337],
    [5.8014, 1.844],
    [11.7, 8.0043],
    [5.5416, 1.0179],
    [7.5402, 6.7504],
    [5.3077, 1.8396],
    [7.4239, 4.2885],
    [7.6031, 4.9981],
    [6.3328, 1.4233],
    [6.3589, -1.4211],
    [6.2742, 2.4756],
    [5.6397, 4.6042],
    [9.3102, 3.9624],
    [9.4536, 5.4141],
    [8.8254, 5.1694],
    [5.1793, -0.74279],
    [21.279, 17.929],
    [14.908, 12.054],
    [18.959, 17.054],
    [7.2182, 4.8852],
    [8.2951, 5.7442],
    [10.236, 7.7754],
    [5.4994, 1.0173],
    [20.341, 20.992],
    [10.136, 6.6799],
    [7.3345, 4.0259],
    [6.0062, 1.2784],
    [7.2259, 3.3411],
    [5.0269, -2.6807],
    [6.5479, 0.29678],
    [7.5386, 3.8845],
    [5.0365, 5.7014],
    [10.274, 6.7526],
    [5.1077, 2.0576],
    [5.7292, 0.47953],
    [5.1884, 0.20421],
    [6.3557, 0.67861],
    [9.7687, 7.5435],
    [6.5159, 5.3436],
    [8.5172, 4.2415],
    [9.1802, 6.7981],
    [6.002, 0.92695],
    [5.5204, 0.152],
    [5.0594, 2.8214],
    [5.7077, 1.8451],
    [7.6366, 4.2959],
    [5.8707, 7.2029],
    [5.3054, 1.9869],
    [8.2934, 0.14454],
    [13.394, 9.0551],
    [5.4369, 0.61705],
])

housing = np.array([
    [2104.0, 3.0, 399900.0],
    [1600.0, 3.0, 329900.0],
    [2400.0, 3.0, 369000.0],
    [1416.0, 2.0, 232000.0],
    [3000.0, 4.0, 539900.0],
    [1985.0, 4.0, 299900.0],
    [1534.0, 3.0, 314900.0],
    [1427.0, 3.0, 198999.0],
    [1380.0, 3.0, 212000.0],
    [1494.0, 3.0, 242500.0],
    [1940.0, 4.0, 239999.0],
    [2000.0, 3.0, 347000.0],
    [1890.0, 3.0, 329999.0],
    [4478.0, 5.0, 699900.0],
    [1268.0, 3.0, 259900.0],
    [2300.0, 4.0, 449900.0],
    [1320.0, 2.0, 299900.0],
    [1236.0, 3.0, 199900.0],
    [2609.0, 4.0, 499998.0],
    [3031.0, 4.0, 599000.0],
    [1767.0, 3.0, 252900.0],
    [1888.0, 2.0, 255000.0],
    [1604.0, 3.0, 242900.0],
    [1962.0, 4.0, 259900.0],
    [3890.0, 3.0, 573900.0],
    [1100.0, 3.0, 249900.0],
    [1458.0, 3.0, 464500.0],
    [2526.0, 3.0, 469000.0],
    [2200.0, 3.0, 475000.0],
    [2637.0, 3.0, 299900.0],
    [1839.0, 2.0, 349900.0],
    [1000.0, 1.0, 169900.0],
    [2040.0, 4.0, 314900.0],
    [3137.0, 3.0, 579900.0],
    [1811.0, 4.0, 285900.0],
    [1437.0, 3.0, 249900.0],
    [1239.0, 3.0, 229900.0],
    [2132.0, 4.0, 345000.0],
    [4215.0, 4.0, 549000.0],
    [2162.0, 4.0, 287000.0],
    [1664.0, 2.0, 368500.0],
    [2238.0, 3.0, 329900.0],
    [2567.0, 4.0, 314000.0],
    [1200.0, 3.0, 299000.0],
    [852.0, 2.0, 179900.0],
    [1852.0, 4.0, 299900.0],
    [1203.0, 3.0, 239500.0],
])
