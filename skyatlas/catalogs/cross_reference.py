"""
Amateur observing lists defined in terms of base-catalog designations.

Each list entry is ``(list_designation, backing_catalog, backing_designation)``:
Bennett 1 is NGC 55, Gum 72 is M 8, and so on. The tables are static data;
``CrossReferenceTables`` indexes them by backing reference so the merge engine
can find every list designation an object carries.
"""

from typing import Dict, Iterable, List, Sequence, Tuple

from .taxonomy import CatalogType

CrossReferenceEntry = Tuple[str, CatalogType, str]

# https://www.docdb.net/tutorials/bennett_catalogue.php
BENNETT_CATALOG: Sequence[CrossReferenceEntry] = (
    ('1', CatalogType.NGC, '55'),
    ('2', CatalogType.NGC, '104'),
    ('3', CatalogType.NGC, '247'),
    ('4', CatalogType.NGC, '253'),
    ('5', CatalogType.NGC, '288'),
    ('6', CatalogType.NGC, '300'),
    ('7', CatalogType.NGC, '362'),
    ('8', CatalogType.NGC, '613'),
    ('9', CatalogType.NGC, '1068'),
    ('10', CatalogType.NGC, '1097'),
    ('10A', CatalogType.NGC, '1232'),
    ('11', CatalogType.NGC, '1261'),
    ('12', CatalogType.NGC, '1291'),
    ('13', CatalogType.NGC, '1313'),
    ('14', CatalogType.NGC, '1316'),
    ('14A', CatalogType.NGC, '1350'),
    ('15', CatalogType.NGC, '1360'),
    ('16', CatalogType.NGC, '1365'),
    ('17', CatalogType.NGC, '1380'),
    ('18', CatalogType.NGC, '1387'),
    ('19', CatalogType.NGC, '1399'),
    ('19A', CatalogType.NGC, '1398'),
    ('20', CatalogType.NGC, '1404'),
    ('21', CatalogType.NGC, '1433'),
    ('21A', CatalogType.NGC, '1512'),
    ('22', CatalogType.NGC, '1535'),
    ('23', CatalogType.NGC, '1549'),
    ('24', CatalogType.NGC, '1553'),
    ('25', CatalogType.NGC, '1566'),
    ('25A', CatalogType.NGC, '1617'),
    ('26', CatalogType.NGC, '1672'),
    ('27', CatalogType.NGC, '1763'),
    ('28', CatalogType.NGC, '1783'),
    ('29', CatalogType.NGC, '1792'),
    ('30', CatalogType.NGC, '1818'),
    ('31', CatalogType.NGC, '1808'),
    ('32', CatalogType.NGC, '1851'),
    ('33', CatalogType.NGC, '1866'),
    ('34', CatalogType.NGC, '1904'),
    ('35', CatalogType.NGC, '2070'),
    ('36', CatalogType.NGC, '2214'),
    ('36A', CatalogType.NGC, '2243'),
    ('37', CatalogType.NGC, '2298'),
    ('37A', CatalogType.NGC, '2467'),
    ('38', CatalogType.NGC, '2489'),
    ('39', CatalogType.NGC, '2506'),
    ('40', CatalogType.NGC, '2627'),
    ('40A', CatalogType.NGC, '2671'),
    ('41', CatalogType.NGC, '2808'),
    ('41A', CatalogType.NGC, '2972'),
    ('41B', CatalogType.NGC, '2997'),
    ('42', CatalogType.NGC, '3115'),
    ('43', CatalogType.NGC, '3132'),
    ('44', CatalogType.NGC, '3201'),
    ('45', CatalogType.NGC, '3242'),
    ('46', CatalogType.NGC, '3621'),
    ('47', CatalogType.MELOTTE, '105'),
    ('48', CatalogType.NGC, '3960'),
    ('49', CatalogType.NGC, '3923'),
    ('50', CatalogType.NGC, '4372'),
    ('51', CatalogType.NGC, '4590'),
    ('52', CatalogType.NGC, '4594'),
    ('53', CatalogType.NGC, '4697'),
    ('54', CatalogType.NGC, '4699'),
    ('55', CatalogType.NGC, '4753'),
    ('56', CatalogType.NGC, '4833'),
    ('57', CatalogType.NGC, '4945'),
    ('58', CatalogType.NGC, '4976'),
    ('59', CatalogType.NGC, '5061'),
    ('59A', CatalogType.NGC, '5068'),
    ('60', CatalogType.NGC, '5128'),
    ('61', CatalogType.NGC, '5139'),
    ('62', CatalogType.NGC, '5189'),
    ('63', CatalogType.NGC, '5236'),
    ('63A', CatalogType.NGC, '5253'),
    ('64', CatalogType.NGC, '5286'),
    ('65', CatalogType.NGC, '5617'),
    ('66', CatalogType.NGC, '5634'),
    ('67', CatalogType.NGC, '5824'),
    ('68', CatalogType.NGC, '5897'),
    ('69', CatalogType.NGC, '5927'),
    ('70', CatalogType.NGC, '5986'),
    ('71', CatalogType.NGC, '5999'),
    ('72', CatalogType.NGC, '6005'),
    ('72A', CatalogType.TRUMPLER, '23'),
    ('73', CatalogType.NGC, '6093'),
    ('74', CatalogType.NGC, '6101'),
    ('75', CatalogType.NGC, '6121'),
    ('76', CatalogType.NGC, '6134'),
    ('77', CatalogType.NGC, '6144'),
    ('78', CatalogType.NGC, '6139'),
    ('79', CatalogType.NGC, '6171'),
    ('79A', CatalogType.NGC, '6167'),
    ('79B', CatalogType.NGC, '6192'),
    ('80', CatalogType.NGC, '6218'),
    ('81', CatalogType.NGC, '6216'),
    ('82', CatalogType.NGC, '6235'),
    ('83', CatalogType.NGC, '6254'),
    ('84', CatalogType.NGC, '6253'),
    ('85', CatalogType.NGC, '6266'),
    ('86', CatalogType.NGC, '6273'),
    ('87', CatalogType.NGC, '6284'),
    ('88', CatalogType.NGC, '6287'),
    ('89', CatalogType.NGC, '6293'),
    ('90', CatalogType.NGC, '6304'),
    ('91', CatalogType.NGC, '6316'),
    ('91A', CatalogType.NGC, '6318'),
    ('92', CatalogType.NGC, '6333'),
    ('93', CatalogType.NGC, '6356'),
    ('94', CatalogType.NGC, '6352'),
    ('95', CatalogType.NGC, '6362'),
    ('96', CatalogType.NGC, '6388'),
    ('97', CatalogType.NGC, '6402'),
    ('98', CatalogType.NGC, '6397'),
    ('98A', CatalogType.NGC, '6440'),
    ('98B', CatalogType.NGC, '6445'),
    ('99', CatalogType.NGC, '6441'),
    ('100', CatalogType.NGC, '6496'),
    ('101', CatalogType.NGC, '6522'),
    ('102', CatalogType.NGC, '6528'),
    ('103', CatalogType.NGC, '6544'),
    ('104', CatalogType.NGC, '6541'),
    ('105', CatalogType.NGC, '6553'),
    ('106', CatalogType.NGC, '6569'),
    ('107', CatalogType.NGC, '6584'),
    ('107A', CatalogType.NGC, '6603'),
    ('108', CatalogType.NGC, '6618'),
    ('109', CatalogType.NGC, '6624'),
    ('110', CatalogType.NGC, '6626'),
    ('111', CatalogType.NGC, '6638'),
    ('112', CatalogType.NGC, '6637'),
    ('112A', CatalogType.NGC, '6642'),
    ('113', CatalogType.NGC, '6652'),
    ('114', CatalogType.NGC, '6656'),
    ('115', CatalogType.NGC, '6681'),
    ('116', CatalogType.NGC, '6705'),
    ('117', CatalogType.NGC, '6712'),
    ('118', CatalogType.NGC, '6715'),
    ('119', CatalogType.NGC, '6723'),
    ('120', CatalogType.NGC, '6744'),
    ('121', CatalogType.NGC, '6752'),
    ('122', CatalogType.NGC, '6809'),
    ('123', CatalogType.NGC, '6818'),
    ('124', CatalogType.NGC, '6864'),
    ('125', CatalogType.NGC, '6981'),
    ('126', CatalogType.NGC, '7009'),
    ('127', CatalogType.NGC, '7089'),
    ('128', CatalogType.NGC, '7099'),
    ('129', CatalogType.NGC, '7293'),
    ('129A', CatalogType.NGC, '7410'),
    ('129B', CatalogType.IC, '1459'),
    ('130', CatalogType.NGC, '7793'),
)

# https://www.docdb.net/tutorials/dunlop_catalogue.php
DUNLOP_CATALOG: Sequence[CrossReferenceEntry] = (
    ('1', CatalogType.NGC, '7590'),
    ('2', CatalogType.NGC, '7599'),
    ('18', CatalogType.NGC, '104'),
    ('23', CatalogType.NGC, '330'),
    ('25', CatalogType.NGC, '346'),
    ('62', CatalogType.NGC, '362'),
    ('68', CatalogType.NGC, '6101'),
    ('81', CatalogType.NGC, '1795'),
    ('90', CatalogType.NGC, '1943'),
    ('98', CatalogType.NGC, '2019'),
    ('102', CatalogType.NGC, '2058'),
    ('106', CatalogType.NGC, '2122'),
    ('114', CatalogType.NGC, '1743'),
    ('129', CatalogType.NGC, '1910'),
    ('131', CatalogType.NGC, '1928'),
    ('136', CatalogType.NGC, '1966'),
    ('142', CatalogType.NGC, '2070'),
    ('143', CatalogType.NGC, '2069'),
    ('160', CatalogType.NGC, '2136'),
    ('164', CatalogType.NGC, '4833'),
    ('167', CatalogType.NGC, '1755'),
    ('169', CatalogType.NGC, '1770'),
    ('175', CatalogType.NGC, '1936'),
    ('193', CatalogType.NGC, '2159'),
    ('194', CatalogType.NGC, '2164'),
    ('196', CatalogType.NGC, '2156'),
    ('201', CatalogType.NGC, '2214'),
    ('206', CatalogType.NGC, '1313'),
    ('210', CatalogType.NGC, '1869'),
    ('211', CatalogType.NGC, '1955'),
    ('213', CatalogType.NGC, '1974'),
    ('215', CatalogType.NGC, '2004'),
    ('218', CatalogType.NGC, '2121'),
    ('220', CatalogType.NGC, '2035'),
    ('225', CatalogType.NGC, '6362'),
    ('235', CatalogType.NGC, '1810'),
    ('236', CatalogType.NGC, '1818'),
    ('240', CatalogType.NGC, '2029'),
    ('241', CatalogType.NGC, '2027'),
    ('246', CatalogType.NGC, '1831'),
    ('262', CatalogType.NGC, '6744'),
    ('265', CatalogType.NGC, '2808'),
    ('272', CatalogType.NGC, '4609'),
    ('273', CatalogType.NGC, '5281'),
    ('282', CatalogType.NGC, '5316'),
    ('289', CatalogType.NGC, '3766'),
    ('291', CatalogType.NGC, '4103'),
    ('292', CatalogType.NGC, '4349'),
    ('295', CatalogType.NGC, '6752'),
    ('297', CatalogType.NGC, '3114'),
    ('301', CatalogType.NGC, '4755'),
    ('302', CatalogType.NGC, '5617'),
    ('304', CatalogType.NGC, '6025'),
    ('309', CatalogType.NGC, '3372'),
    ('311', CatalogType.NGC, '4852'),
    ('313', CatalogType.NGC, '5606'),
    ('323', CatalogType.NGC, '3532'),
    ('326', CatalogType.NGC, '6087'),
    ('333', CatalogType.NGC, '5715'),
    ('334', CatalogType.NGC, '6005'),
    ('337', CatalogType.NGC, '1261'),
    ('342', CatalogType.NGC, '5662'),
    ('343', CatalogType.NGC, '5999'),
    ('348', CatalogType.NGC, '1515'),
    ('349', CatalogType.NGC, '3960'),
    ('355', CatalogType.NGC, '3330'),
    ('356', CatalogType.NGC, '5749'),
    ('357', CatalogType.NGC, '5925'),
    ('359', CatalogType.NGC, '6031'),
    ('360', CatalogType.NGC, '6067'),
    ('364', CatalogType.NGC, '6208'),
    ('366', CatalogType.NGC, '6397'),
    ('376', CatalogType.NGC, '6584'),
    ('386', CatalogType.NGC, '3228'),
    ('388', CatalogType.NGC, '5286'),
    ('389', CatalogType.NGC, '5927'),
    ('397', CatalogType.NGC, '2972'),
    ('400', CatalogType.NGC, '6167'),
    ('406', CatalogType.NGC, '7049'),
    ('410', CatalogType.NGC, '2547'),
    ('411', CatalogType.NGC, '4945'),
    ('412', CatalogType.NGC, '6134'),
    ('413', CatalogType.NGC, '6193'),
    ('417', CatalogType.NGC, '6352'),
    ('425', CatalogType.NGC, '6861'),
    ('426', CatalogType.NGC, '1433'),
    ('431', CatalogType.NGC, '5460'),
    ('438', CatalogType.NGC, '1493'),
    ('440', CatalogType.NGC, '5139'),
    ('442', CatalogType.NGC, '6204'),
    ('445', CatalogType.NGC, '3201'),
    ('454', CatalogType.NGC, '6216'),
    ('456', CatalogType.NGC, '6259'),
    ('457', CatalogType.NGC, '6388'),
    ('466', CatalogType.NGC, '1512'),
    ('469', CatalogType.NGC, '5643'),
    ('473', CatalogType.NGC, '6541'),
    ('479', CatalogType.NGC, '625'),
    ('480', CatalogType.NGC, '1487'),
    ('481', CatalogType.NGC, '3680'),
    ('482', CatalogType.NGC, '5128'),
    ('483', CatalogType.NGC, '6192'),
    ('487', CatalogType.NGC, '1291'),
    ('499', CatalogType.NGC, '6231'),
    ('507', CatalogType.NGC, '55'),
    ('508', CatalogType.NGC, '1851'),
    ('511', CatalogType.NGC, '4709'),
    ('514', CatalogType.NGC, '6124'),
    ('518', CatalogType.NGC, '7410'),
    ('520', CatalogType.NGC, '6242'),
    ('521', CatalogType.NGC, '6268'),
    ('522', CatalogType.NGC, '6318'),
    ('535', CatalogType.NGC, '2477'),
    ('536', CatalogType.NGC, '6139'),
    ('547', CatalogType.NGC, '1317'),
    ('548', CatalogType.NGC, '1316'),
    ('549', CatalogType.NGC, '1808'),
    ('552', CatalogType.NGC, '5986'),
    ('556', CatalogType.NGC, '6281'),
    ('557', CatalogType.NGC, '6441'),
    ('562', CatalogType.NGC, '1436'),
    ('563', CatalogType.NGC, '2546'),
    ('564', CatalogType.NGC, '2818'),
    ('568', CatalogType.NGC, '6400'),
    ('573', CatalogType.NGC, '6723'),
    ('574', CatalogType.NGC, '1380'),
    ('578', CatalogType.NGC, '2298'),
    ('591', CatalogType.NGC, '1350'),
    ('594', CatalogType.NGC, '2090'),
    ('600', CatalogType.NGC, '1532'),
    ('607', CatalogType.NGC, '6652'),
    ('609', CatalogType.NGC, '2658'),
    ('612', CatalogType.NGC, '6416'),
    ('613', CatalogType.NGC, '6637'),
    ('614', CatalogType.NGC, '6681'),
    ('617', CatalogType.NGC, '3621'),
    ('619', CatalogType.NGC, '6569'),
    ('620', CatalogType.NGC, '6809'),
    ('623', CatalogType.NGC, '5253'),
    ('624', CatalogType.NGC, '6715'),
    ('626', CatalogType.NGC, '2489'),
    ('627', CatalogType.NGC, '6266'),
    ('628', CatalogType.NGC, '5236'),
)

# https://www.go-astronomy.com/herschel-objects.htm
HERSCHEL_CATALOG: Sequence[CrossReferenceEntry] = (
    ('1', CatalogType.NGC, '40'),
    ('2', CatalogType.NGC, '129'),
    ('3', CatalogType.NGC, '136'),
    ('4', CatalogType.NGC, '157'),
    ('5', CatalogType.NGC, '185'),
    ('6', CatalogType.NGC, '205'),
    ('7', CatalogType.NGC, '225'),
    ('8', CatalogType.NGC, '246'),
    ('9', CatalogType.NGC, '247'),
    ('10', CatalogType.NGC, '253'),
    ('11', CatalogType.NGC, '278'),
    ('12', CatalogType.NGC, '288'),
    ('13', CatalogType.NGC, '381'),
    ('14', CatalogType.NGC, '404'),
    ('15', CatalogType.NGC, '436'),
    ('16', CatalogType.NGC, '457'),
    ('17', CatalogType.NGC, '488'),
    ('18', CatalogType.NGC, '524'),
    ('19', CatalogType.NGC, '559'),
    ('20', CatalogType.NGC, '584'),
    ('21', CatalogType.NGC, '596'),
    ('22', CatalogType.NGC, '598'),
    ('23', CatalogType.NGC, '613'),
    ('24', CatalogType.NGC, '615'),
    ('25', CatalogType.NGC, '637'),
    ('26', CatalogType.NGC, '650'),
    ('26', CatalogType.NGC, '651'),
    ('27', CatalogType.NGC, '654'),
    ('28', CatalogType.NGC, '659'),
    ('29', CatalogType.NGC, '663'),
    ('30', CatalogType.NGC, '720'),
    ('31', CatalogType.NGC, '752'),
    ('32', CatalogType.NGC, '772'),
    ('33', CatalogType.NGC, '779'),
    ('34', CatalogType.NGC, '869'),
    ('35', CatalogType.NGC, '884'),
    ('36', CatalogType.NGC, '891'),
    ('37', CatalogType.NGC, '908'),
    ('38', CatalogType.NGC, '936'),
    ('39', CatalogType.NGC, '1022'),
    ('40', CatalogType.NGC, '1023'),
    ('41', CatalogType.NGC, '1027'),
    ('42', CatalogType.NGC, '1052'),
    ('43', CatalogType.NGC, '1055'),
    ('44', CatalogType.NGC, '1084'),
    ('45', CatalogType.NGC, '1245'),
    ('46', CatalogType.NGC, '1342'),
    ('47', CatalogType.NGC, '1407'),
    ('48', CatalogType.NGC, '1444'),
    ('49', CatalogType.NGC, '1501'),
    ('50', CatalogType.NGC, '1502'),
    ('51', CatalogType.NGC, '1513'),
    ('52', CatalogType.NGC, '1528'),
    ('53', CatalogType.NGC, '1535'),
    ('54', CatalogType.NGC, '1545'),
    ('55', CatalogType.NGC, '1647'),
    ('56', CatalogType.NGC, '1664'),
    ('57', CatalogType.NGC, '1788'),
    ('58', CatalogType.NGC, '1817'),
    ('59', CatalogType.NGC, '1857'),
    ('60', CatalogType.NGC, '1907'),
    ('61', CatalogType.NGC, '1931'),
    ('62', CatalogType.NGC, '1961'),
    ('63', CatalogType.NGC, '1964'),
    ('64', CatalogType.NGC, '1980'),
    ('65', CatalogType.NGC, '1999'),
    ('66', CatalogType.NGC, '2022'),
    ('67', CatalogType.NGC, '2024'),
    ('68', CatalogType.NGC, '2126'),
    ('69', CatalogType.NGC, '2129'),
    ('70', CatalogType.NGC, '2158'),
    ('71', CatalogType.NGC, '2169'),
    ('72', CatalogType.NGC, '2185'),
    ('73', CatalogType.NGC, '2186'),
    ('74', CatalogType.NGC, '2194'),
    ('75', CatalogType.NGC, '2204'),
    ('76', CatalogType.NGC, '2215'),
    ('77', CatalogType.NGC, '2232'),
    ('78', CatalogType.NGC, '2244'),
    ('79', CatalogType.NGC, '2251'),
    ('80', CatalogType.NGC, '2264'),
    ('81', CatalogType.NGC, '2266'),
    ('82', CatalogType.NGC, '2281'),
    ('83', CatalogType.NGC, '2286'),
    ('84', CatalogType.NGC, '2301'),
    ('85', CatalogType.NGC, '2304'),
    ('86', CatalogType.NGC, '2311'),
    ('87', CatalogType.NGC, '2324'),
    ('88', CatalogType.NGC, '2335'),
    ('89', CatalogType.NGC, '2343'),
    ('90', CatalogType.NGC, '2353'),
    ('91', CatalogType.NGC, '2354'),
    ('92', CatalogType.NGC, '2355'),
    ('93', CatalogType.NGC, '2360'),
    ('94', CatalogType.NGC, '2362'),
    ('95', CatalogType.NGC, '2371'),
    ('96', CatalogType.NGC, '2372'),
    ('97', CatalogType.NGC, '2392'),
    ('98', CatalogType.NGC, '2395'),
    ('99', CatalogType.NGC, '2403'),
    ('100', CatalogType.NGC, '2419'),
    ('101', CatalogType.NGC, '2420'),
    ('102', CatalogType.NGC, '2421'),
    ('103', CatalogType.NGC, '2422'),
    ('104', CatalogType.NGC, '2423'),
    ('105', CatalogType.NGC, '2438'),
    ('106', CatalogType.NGC, '2440'),
    ('107', CatalogType.NGC, '2479'),
    ('108', CatalogType.NGC, '2482'),
    ('109', CatalogType.NGC, '2489'),
    ('110', CatalogType.NGC, '2506'),
    ('111', CatalogType.NGC, '2509'),
    ('112', CatalogType.NGC, '2527'),
    ('113', CatalogType.NGC, '2539'),
    ('114', CatalogType.NGC, '2548'),
    ('115', CatalogType.NGC, '2567'),
    ('116', CatalogType.NGC, '2571'),
    ('117', CatalogType.NGC, '2613'),
    ('118', CatalogType.NGC, '2627'),
    ('119', CatalogType.NGC, '2655'),
    ('120', CatalogType.NGC, '2681'),
    ('121', CatalogType.NGC, '2683'),
    ('122', CatalogType.NGC, '2742'),
    ('123', CatalogType.NGC, '2768'),
    ('124', CatalogType.NGC, '2775'),
    ('125', CatalogType.NGC, '2782'),
    ('126', CatalogType.NGC, '2787'),
    ('127', CatalogType.NGC, '2811'),
    ('128', CatalogType.NGC, '2841'),
    ('129', CatalogType.NGC, '2859'),
    ('130', CatalogType.NGC, '2903'),
    ('131', CatalogType.NGC, '2950'),
    ('132', CatalogType.NGC, '2964'),
    ('133', CatalogType.NGC, '2974'),
    ('134', CatalogType.NGC, '2976'),
    ('135', CatalogType.NGC, '2985'),
    ('136', CatalogType.NGC, '3034'),
    ('137', CatalogType.NGC, '3077'),
    ('138', CatalogType.NGC, '3079'),
    ('139', CatalogType.NGC, '3115'),
    ('140', CatalogType.NGC, '3147'),
    ('141', CatalogType.NGC, '3166'),
    ('142', CatalogType.NGC, '3169'),
    ('143', CatalogType.NGC, '3184'),
    ('144', CatalogType.NGC, '3190'),
    ('145', CatalogType.NGC, '3193'),
    ('146', CatalogType.NGC, '3198'),
    ('147', CatalogType.NGC, '3226'),
    ('148', CatalogType.NGC, '3227'),
    ('149', CatalogType.NGC, '3242'),
    ('150', CatalogType.NGC, '3245'),
    ('151', CatalogType.NGC, '3277'),
    ('152', CatalogType.NGC, '3294'),
    ('153', CatalogType.NGC, '3310'),
    ('154', CatalogType.NGC, '3344'),
    ('155', CatalogType.NGC, '3377'),
    ('156', CatalogType.NGC, '3379'),
    ('157', CatalogType.NGC, '3384'),
    ('158', CatalogType.NGC, '3395'),
    ('159', CatalogType.NGC, '3412'),
    ('160', CatalogType.NGC, '3414'),
    ('161', CatalogType.NGC, '3432'),
    ('162', CatalogType.NGC, '3486'),
    ('163', CatalogType.NGC, '3489'),
    ('164', CatalogType.NGC, '3504'),
    ('165', CatalogType.NGC, '3521'),
    ('166', CatalogType.NGC, '3556'),
    ('167', CatalogType.NGC, '3593'),
    ('168', CatalogType.NGC, '3607'),
    ('169', CatalogType.NGC, '3608'),
    ('170', CatalogType.NGC, '3610'),
    ('171', CatalogType.NGC, '3613'),
    ('172', CatalogType.NGC, '3619'),
    ('173', CatalogType.NGC, '3621'),
    ('174', CatalogType.NGC, '3626'),
    ('175', CatalogType.NGC, '3628'),
    ('176', CatalogType.NGC, '3631'),
    ('177', CatalogType.NGC, '3640'),
    ('178', CatalogType.NGC, '3655'),
    ('179', CatalogType.NGC, '3665'),
    ('180', CatalogType.NGC, '3675'),
    ('181', CatalogType.NGC, '3686'),
    ('182', CatalogType.NGC, '3726'),
    ('183', CatalogType.NGC, '3729'),
    ('184', CatalogType.NGC, '3810'),
    ('185', CatalogType.NGC, '3813'),
    ('186', CatalogType.NGC, '3877'),
    ('187', CatalogType.NGC, '3893'),
    ('188', CatalogType.NGC, '3898'),
    ('189', CatalogType.NGC, '3900'),
    ('190', CatalogType.NGC, '3912'),
    ('191', CatalogType.NGC, '3912'),
    ('192', CatalogType.NGC, '3941'),
    ('193', CatalogType.NGC, '3945'),
    ('194', CatalogType.NGC, '3949'),
    ('195', CatalogType.NGC, '3953'),
    ('196', CatalogType.NGC, '3962'),
    ('197', CatalogType.NGC, '3982'),
    ('198', CatalogType.NGC, '3992'),
    ('199', CatalogType.NGC, '3998'),
    ('200', CatalogType.NGC, '4026'),
    ('201', CatalogType.NGC, '4027'),
    ('202', CatalogType.NGC, '4030'),
    ('203', CatalogType.NGC, '4036'),
    ('204', CatalogType.NGC, '4038'),
    ('204', CatalogType.NGC, '4039'),
    ('205', CatalogType.NGC, '4041'),
    ('206', CatalogType.NGC, '4051'),
    ('207', CatalogType.NGC, '4085'),
    ('208', CatalogType.NGC, '4088'),
    ('209', CatalogType.NGC, '4102'),
    ('210', CatalogType.NGC, '4111'),
    ('211', CatalogType.NGC, '4143'),
    ('212', CatalogType.NGC, '4147'),
    ('213', CatalogType.NGC, '4150'),
    ('214', CatalogType.NGC, '4151'),
    ('215', CatalogType.NGC, '4179'),
    ('216', CatalogType.NGC, '4203'),
    ('217', CatalogType.NGC, '4214'),
    ('218', CatalogType.NGC, '4216'),
    ('219', CatalogType.NGC, '4245'),
    ('220', CatalogType.NGC, '4251'),
    ('221', CatalogType.NGC, '4258'),
    ('222', CatalogType.NGC, '4261'),
    ('223', CatalogType.NGC, '4273'),
    ('224', CatalogType.NGC, '4274'),
    ('225', CatalogType.NGC, '4278'),
    ('226', CatalogType.NGC, '4281'),
    ('227', CatalogType.NGC, '4293'),
    ('228', CatalogType.NGC, '4303'),
    ('229', CatalogType.NGC, '4314'),
    ('230', CatalogType.NGC, '4346'),
    ('231', CatalogType.NGC, '4350'),
    ('232', CatalogType.NGC, '4361'),
    ('233', CatalogType.NGC, '4365'),
    ('234', CatalogType.NGC, '4371'),
    ('235', CatalogType.NGC, '4394'),
    ('236', CatalogType.NGC, '4414'),
    ('237', CatalogType.NGC, '4419'),
    ('238', CatalogType.NGC, '4429'),
    ('239', CatalogType.NGC, '4435'),
    ('240', CatalogType.NGC, '4438'),
    ('241', CatalogType.NGC, '4442'),
    ('242', CatalogType.NGC, '4448'),
    ('243', CatalogType.NGC, '4449'),
    ('244', CatalogType.NGC, '4450'),
    ('245', CatalogType.NGC, '4459'),
    ('246', CatalogType.NGC, '4473'),
    ('247', CatalogType.NGC, '4477'),
    ('248', CatalogType.NGC, '4478'),
    ('249', CatalogType.NGC, '4485'),
    ('250', CatalogType.NGC, '4490'),
    ('251', CatalogType.NGC, '4494'),
    ('252', CatalogType.NGC, '4526'),
    ('253', CatalogType.NGC, '4527'),
    ('254', CatalogType.NGC, '4535'),
    ('255', CatalogType.NGC, '4536'),
    ('256', CatalogType.NGC, '4546'),
    ('257', CatalogType.NGC, '4548'),
    ('258', CatalogType.NGC, '4550'),
    ('259', CatalogType.NGC, '4559'),
    ('260', CatalogType.NGC, '4565'),
    ('261', CatalogType.NGC, '4570'),
    ('262', CatalogType.NGC, '4594'),
    ('263', CatalogType.NGC, '4596'),
    ('264', CatalogType.NGC, '4618'),
    ('265', CatalogType.NGC, '4631'),
    ('266', CatalogType.NGC, '4636'),
    ('267', CatalogType.NGC, '4643'),
    ('268', CatalogType.NGC, '4654'),
    ('269', CatalogType.NGC, '4656'),
    ('270', CatalogType.NGC, '4660'),
    ('271', CatalogType.NGC, '4665'),
    ('272', CatalogType.NGC, '4666'),
    ('273', CatalogType.NGC, '4689'),
    ('274', CatalogType.NGC, '4697'),
    ('275', CatalogType.NGC, '4698'),
    ('276', CatalogType.NGC, '4669'),
    ('277', CatalogType.NGC, '4725'),
    ('278', CatalogType.NGC, '4753'),
    ('279', CatalogType.NGC, '4754'),
    ('280', CatalogType.NGC, '4762'),
    ('281', CatalogType.NGC, '4781'),
    ('282', CatalogType.NGC, '4800'),
    ('283', CatalogType.NGC, '4845'),
    ('284', CatalogType.NGC, '4856'),
    ('285', CatalogType.NGC, '4866'),
    ('286', CatalogType.NGC, '4900'),
    ('287', CatalogType.NGC, '4958'),
    ('288', CatalogType.NGC, '4995'),
    ('289', CatalogType.NGC, '5005'),
    ('290', CatalogType.NGC, '5033'),
    ('291', CatalogType.NGC, '5054'),
    ('292', CatalogType.NGC, '5195'),
    ('293', CatalogType.NGC, '5248'),
    ('294', CatalogType.NGC, '5273'),
    ('295', CatalogType.NGC, '5322'),
    ('296', CatalogType.NGC, '5363'),
    ('297', CatalogType.NGC, '5364'),
    ('298', CatalogType.NGC, '5466'),
    ('299', CatalogType.NGC, '5473'),
    ('300', CatalogType.NGC, '5474'),
    ('301', CatalogType.NGC, '5557'),
    ('302', CatalogType.NGC, '5566'),
    ('303', CatalogType.NGC, '5576'),
    ('304', CatalogType.NGC, '5631'),
    ('305', CatalogType.NGC, '5634'),
    ('306', CatalogType.NGC, '5676'),
    ('307', CatalogType.NGC, '5689'),
    ('308', CatalogType.NGC, '5694'),
    ('309', CatalogType.NGC, '5746'),
    ('310', CatalogType.NGC, '5846'),
    ('311', CatalogType.NGC, '5866'),
    ('312', CatalogType.NGC, '5897'),
    ('313', CatalogType.NGC, '5907'),
    ('314', CatalogType.NGC, '5982'),
    ('315', CatalogType.NGC, '6118'),
    ('316', CatalogType.NGC, '6144'),
    ('317', CatalogType.NGC, '6171'),
    ('318', CatalogType.NGC, '6207'),
    ('319', CatalogType.NGC, '6217'),
    ('320', CatalogType.NGC, '6229'),
    ('321', CatalogType.NGC, '6235'),
    ('322', CatalogType.NGC, '6284'),
    ('323', CatalogType.NGC, '6287'),
    ('324', CatalogType.NGC, '6293'),
    ('325', CatalogType.NGC, '6304'),
    ('326', CatalogType.NGC, '6316'),
    ('327', CatalogType.NGC, '6342'),
    ('328', CatalogType.NGC, '6355'),
    ('329', CatalogType.NGC, '6356'),
    ('330', CatalogType.NGC, '6369'),
    ('331', CatalogType.NGC, '6401'),
    ('332', CatalogType.NGC, '6426'),
    ('333', CatalogType.NGC, '6440'),
    ('334', CatalogType.NGC, '6445'),
    ('335', CatalogType.NGC, '6451'),
    ('336', CatalogType.NGC, '6514'),
    ('337', CatalogType.NGC, '6517'),
    ('338', CatalogType.NGC, '6520'),
    ('339', CatalogType.NGC, '6522'),
    ('340', CatalogType.NGC, '6528'),
    ('341', CatalogType.NGC, '6540'),
    ('342', CatalogType.NGC, '6543'),
    ('343', CatalogType.NGC, '6544'),
    ('344', CatalogType.NGC, '6553'),
    ('345', CatalogType.NGC, '6568'),
    ('346', CatalogType.NGC, '6569'),
    ('347', CatalogType.NGC, '6583'),
    ('348', CatalogType.NGC, '6624'),
    ('349', CatalogType.NGC, '6629'),
    ('350', CatalogType.NGC, '6633'),
    ('351', CatalogType.NGC, '6638'),
    ('352', CatalogType.NGC, '6642'),
    ('353', CatalogType.NGC, '6645'),
    ('354', CatalogType.NGC, '6664'),
    ('355', CatalogType.NGC, '6712'),
    ('356', CatalogType.NGC, '6755'),
    ('357', CatalogType.NGC, '6756'),
    ('358', CatalogType.NGC, '6781'),
    ('359', CatalogType.NGC, '6802'),
    ('360', CatalogType.NGC, '6818'),
    ('361', CatalogType.NGC, '6823'),
    ('362', CatalogType.NGC, '6826'),
    ('363', CatalogType.NGC, '6830'),
    ('364', CatalogType.NGC, '6834'),
    ('365', CatalogType.NGC, '6866'),
    ('366', CatalogType.NGC, '6882'),
    ('367', CatalogType.NGC, '6885'),
    ('368', CatalogType.NGC, '6905'),
    ('369', CatalogType.NGC, '6910'),
    ('370', CatalogType.NGC, '6934'),
    ('371', CatalogType.NGC, '6939'),
    ('372', CatalogType.NGC, '6940'),
    ('373', CatalogType.NGC, '6946'),
    ('374', CatalogType.NGC, '7000'),
    ('375', CatalogType.NGC, '7006'),
    ('376', CatalogType.NGC, '7008'),
    ('377', CatalogType.NGC, '7009'),
    ('378', CatalogType.NGC, '7044'),
    ('379', CatalogType.NGC, '7062'),
    ('380', CatalogType.NGC, '7086'),
    ('381', CatalogType.NGC, '7128'),
    ('382', CatalogType.NGC, '7142'),
    ('383', CatalogType.NGC, '7160'),
    ('384', CatalogType.NGC, '7209'),
    ('385', CatalogType.NGC, '7217'),
    ('386', CatalogType.NGC, '7243'),
    ('387', CatalogType.NGC, '7296'),
    ('388', CatalogType.NGC, '7331'),
    ('389', CatalogType.NGC, '7380'),
    ('390', CatalogType.NGC, '7448'),
    ('391', CatalogType.NGC, '7479'),
    ('392', CatalogType.NGC, '7510'),
    ('393', CatalogType.NGC, '7606'),
    ('394', CatalogType.NGC, '7662'),
    ('395', CatalogType.NGC, '7686'),
    ('396', CatalogType.NGC, '7723'),
    ('397', CatalogType.NGC, '7727'),
    ('398', CatalogType.NGC, '7789'),
    ('399', CatalogType.NGC, '7790'),
    ('400', CatalogType.NGC, '7814'),
)

# https://en.wikipedia.org/wiki/Gum_catalog
GUM_CATALOG: Sequence[CrossReferenceEntry] = (
    ('4', CatalogType.NGC, '2359'),
    ('15', CatalogType.RCW, '32'),
    ('20', CatalogType.RCW, '36'),
    ('29', CatalogType.RCW, '49'),
    ('60', CatalogType.NGC, '6302'),
    ('64', CatalogType.NGC, '6334'),
    ('66', CatalogType.NGC, '6357'),
    ('72', CatalogType.MESSIER, '8'),
    ('76', CatalogType.NGC, '6514'),
    ('81', CatalogType.MESSIER, '17'),
    ('83', CatalogType.MESSIER, '16'),
)


class CrossReferenceTables:
    """
    Read-only index of the observing lists keyed by backing reference.

    Lookups return list designations in a fixed order: Bennett, Dunlop,
    Herschel, Gum, each in table order.
    """

    def __init__(self, tables: Iterable[Tuple[CatalogType, Iterable[CrossReferenceEntry]]]):
        """
        Build the index.

        Args:
            tables: Pairs of (list catalog type, entries). The order of the
                pairs defines the order of lookup results.
        """
        index: Dict[Tuple[CatalogType, str], List[Tuple[CatalogType, str]]] = {}
        size = 0

        for list_type, entries in tables:
            for list_designation, backing_type, backing_designation in entries:
                key = (CatalogType(backing_type), backing_designation)
                index.setdefault(key, []).append((CatalogType(list_type), list_designation))
                size += 1

        self._index = {key: tuple(value) for key, value in index.items()}
        self._size = size

    @classmethod
    def default(cls) -> 'CrossReferenceTables':
        """Tables shipped with SkyAtlas."""
        return cls((
            (CatalogType.BENNETT, BENNETT_CATALOG),
            (CatalogType.DUNLOP, DUNLOP_CATALOG),
            (CatalogType.HERSCHEL, HERSCHEL_CATALOG),
            (CatalogType.GUM, GUM_CATALOG),
        ))

    def lookup(self, catalog_type: CatalogType, designation: str) -> List[Tuple[CatalogType, str]]:
        """Return every (list catalog, list designation) backed by the given reference."""
        return list(self._index.get((catalog_type, designation), ()))

    def __len__(self) -> int:
        return self._size
